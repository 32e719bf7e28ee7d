"""SelectionStore: per-item ticked state and the derived ticked-all flag."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any

from .item import contains, is_ticked, set_ticked
from .validation import validate_collection

logger = logging.getLogger(__name__)


class SelectionStore:
    """Single source of truth for ticked state and its aggregate.

    The collection is borrowed from the host, not copied. The host may
    add or remove items between handled events, so nothing here caches
    the collection length: every aggregate computation re-reads the
    live sequence.

    ``ticked_all`` is derived state. Reading it, toggling an item and
    toggling all re-derive it from the live items, so host edits made
    between events are always seen. ``set_all`` is the one path that
    assigns it directly, since a uniform assignment establishes the
    invariant by construction.
    """

    def __init__(self, collection: MutableSequence) -> None:
        self._collection = validate_collection(collection)
        self._ticked_all = False
        self.recompute_aggregate()

    @property
    def collection(self) -> MutableSequence:
        """The live collection reference."""
        return self._collection

    @property
    def ticked_all(self) -> bool:
        return self.recompute_aggregate()

    def toggle_item(self, item: Any) -> None:
        """Flip ``item``'s ticked flag and recompute the aggregate.

        Items that are not part of the collection (e.g. stale references
        held by a render layer across a re-render) are ignored.
        """
        if not contains(self._collection, item):
            logger.debug("toggle_item: item not in collection, ignored")
            return
        set_ticked(item, not is_ticked(item))
        self.recompute_aggregate()

    def set_all(self, value: bool) -> None:
        """Set every item's ticked flag to ``value``."""
        value = bool(value)
        for item in self._collection:
            set_ticked(item, value)
        # An empty collection is never "all ticked".
        self._ticked_all = value and len(self._collection) > 0

    def toggle_all(self) -> None:
        """Negate the live aggregate and apply it to every item.

        From a partially ticked state the aggregate is False, so this
        ticks everything.
        """
        self.set_all(not self.recompute_aggregate())

    def recompute_aggregate(self) -> bool:
        """Re-derive ``ticked_all`` from the live collection."""
        items = self._collection
        self._ticked_all = len(items) > 0 and all(is_ticked(i) for i in items)
        return self._ticked_all

    def ticked_items(self) -> list:
        """Items currently ticked, in collection order."""
        return [item for item in self._collection if is_ticked(item)]

    def ticked_count(self) -> int:
        return sum(1 for item in self._collection if is_ticked(item))

    def __repr__(self) -> str:
        return (
            f"SelectionStore(items={len(self._collection)}, "
            f"ticked={self.ticked_count()}, ticked_all={self.ticked_all})"
        )
