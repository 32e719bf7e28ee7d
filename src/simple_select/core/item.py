"""Item access helpers: items are mappings or objects with a ``ticked`` flag."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Sequence

TICKED = "ticked"


def is_ticked(item: Any) -> bool:
    """Read an item's ticked flag. A missing flag reads as False."""
    if isinstance(item, Mapping):
        return bool(item.get(TICKED, False))
    return bool(getattr(item, TICKED, False))


def set_ticked(item: Any, value: bool) -> None:
    """Write an item's ticked flag in place."""
    if isinstance(item, MutableMapping):
        item[TICKED] = bool(value)
    else:
        setattr(item, TICKED, bool(value))


def display_value(item: Any, field: str) -> Any:
    """Return the display field of an item, or "" if it has none."""
    if isinstance(item, Mapping):
        return item.get(field, "")
    return getattr(item, field, "")


def index_of(collection: Sequence, item: Any) -> int | None:
    """Position of ``item`` in ``collection`` by identity, or None."""
    for i, candidate in enumerate(collection):
        if candidate is item:
            return i
    return None


def contains(collection: Sequence, item: Any) -> bool:
    return index_of(collection, item) is not None
