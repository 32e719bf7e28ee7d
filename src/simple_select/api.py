"""SimpleSelect: the main user-facing API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

import pandas as pd

from .core.config import SelectConfig
from .core.controller import SelectionController
from .core.item import TICKED
from .core.store import SelectionStore
from .core.validation import validate_delegate


class SimpleSelect:
    """Select list over a host-owned collection.

    Usage::

        import simple_select as ss

        items = [{"name": "item 1", "ticked": False},
                 {"name": "item 2", "ticked": False}]
        sel = ss.SimpleSelect(items, on_item_click=lambda item: print(item))
        sel.handle_item_click(items[0])
        sel.ticked_all          # False
        sel.handle_tick_all_click()
        sel.ticked_all          # True
        sel.show()              # Panel checkboxes

    The collection is shared by reference: ticks are written into the
    host's items, and items the host adds or removes between events are
    picked up on the next event.
    """

    def __init__(
        self,
        collection: list,
        on_item_click: Callable[[Any], Any] | None = None,
        on_tick_all: Callable[[], Any] | None = None,
        display_field: str = "name",
        item_template: str | None = None,
        select_all_label: str = "Select all",
    ) -> None:
        self._store = SelectionStore(collection)
        self._config = SelectConfig(
            on_item_click=validate_delegate(on_item_click, "on_item_click"),
            on_tick_all=validate_delegate(on_tick_all, "on_tick_all"),
            display_field=display_field,
            item_template=item_template,
            select_all_label=select_all_label,
        )
        self._controller = SelectionController(self._store, self._config)
        self._view = None

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        ticked_column: str = TICKED,
        **kwargs: Any,
    ) -> SimpleSelect:
        """Build a select list from the rows of a DataFrame.

        Each row becomes a dict item. Rows start unticked unless
        ``ticked_column`` is present.
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(
                f"Expected a pandas DataFrame, got {type(df).__name__}."
            )
        records = df.to_dict("records")
        for record in records:
            ticked = record.pop(ticked_column, False)
            record[TICKED] = False if pd.isna(ticked) else bool(ticked)
        return cls(records, **kwargs)

    # --- State ---

    @property
    def collection(self) -> list:
        return self._store.collection

    @property
    def ticked_all(self) -> bool:
        return self._store.ticked_all

    @property
    def selected(self) -> list:
        """Currently ticked items, in collection order."""
        return self._store.ticked_items()

    @property
    def config(self) -> SelectConfig:
        return self._config

    @property
    def controller(self) -> SelectionController:
        return self._controller

    def to_dataframe(self) -> pd.DataFrame:
        """Snapshot of the collection (including ticked flags) as a DataFrame."""
        return pd.DataFrame.from_records(
            [dict(item) if isinstance(item, Mapping) else vars(item)
             for item in self._store.collection]
        )

    # --- Click entry points ---

    def handle_item_click(self, item: Any) -> None:
        self._controller.handle_item_click(item)

    def handle_tick_all_click(self) -> None:
        self._controller.handle_tick_all_click()

    def has_on_item_click(self) -> bool:
        return self._controller.has_on_item_click()

    def has_on_tick_all(self) -> bool:
        return self._controller.has_on_tick_all()

    def on_item_click(self, callback: Callable[[Any], Any] | None) -> SimpleSelect:
        """Bind (or unbind, with None) the item delegate. Returns self."""
        self._config.on_item_click = validate_delegate(callback, "on_item_click")
        return self

    def on_tick_all(self, callback: Callable[[], Any] | None) -> SimpleSelect:
        """Bind (or unbind, with None) the select-all delegate. Returns self."""
        self._config.on_tick_all = validate_delegate(callback, "on_tick_all")
        return self

    # --- Rendering ---

    def to_html(self) -> str:
        """Render the list as an HTML fragment."""
        from .export.html_export import HTMLExporter

        return HTMLExporter.render(self._store, self._config)

    def export_html(self, path: str, title: str = "simple-select") -> None:
        """Export the list as a standalone HTML file.

        Parameters
        ----------
        path : str
            Output file path.
        title : str
            HTML page title.
        """
        from .export.html_export import HTMLExporter

        HTMLExporter.export(path, self._store, self._config, title=title)

    def show(self) -> Any:
        """Build the interactive Panel view. Returns the Panel layout."""
        from .widget.select_list import SelectListView

        self._view = SelectListView(self._controller)
        return self._view.build_panel()

    def __repr__(self) -> str:
        return f"SimpleSelect({self._store!r})"
