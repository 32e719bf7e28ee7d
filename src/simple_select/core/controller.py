"""SelectionController: click entry points and optional delegate dispatch."""

from __future__ import annotations

import logging
from typing import Any

from .config import SelectConfig
from .store import SelectionStore

logger = logging.getLogger(__name__)


class SelectionController:
    """Bridge between render-layer clicks and a SelectionStore.

    Each handler mutates the store first and only then calls the
    delegate, so a delegate always observes the post-click state.
    Delegate exceptions are not caught.
    """

    def __init__(
        self,
        store: SelectionStore,
        config: SelectConfig | None = None,
    ) -> None:
        self.store = store
        self.config = config if config is not None else SelectConfig()

    def has_on_item_click(self) -> bool:
        return self.config.has_on_item_click()

    def has_on_tick_all(self) -> bool:
        return self.config.has_on_tick_all()

    def handle_item_click(self, item: Any) -> None:
        """Toggle ``item`` and notify ``on_item_click`` if bound."""
        self.store.toggle_item(item)
        if self.has_on_item_click():
            logger.debug("Dispatching on_item_click")
            self.config.on_item_click(item)

    def handle_tick_all_click(self) -> None:
        """Toggle every item and notify ``on_tick_all`` if bound."""
        self.store.toggle_all()
        if self.has_on_tick_all():
            logger.debug("Dispatching on_tick_all (ticked_all=%s)", self.store.ticked_all)
            self.config.on_tick_all()

    @property
    def ticked_all(self) -> bool:
        return self.store.ticked_all
