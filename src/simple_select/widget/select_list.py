"""SelectListView: Panel checkboxes bound to a SelectionController."""

from __future__ import annotations

from typing import Any

import panel as pn

from ..core.controller import SelectionController
from ..core.item import contains, display_value, is_ticked


class SelectListView:
    """Interactive list of checkboxes with a "select all" control.

    Checkbox changes are forwarded to the controller. The view then
    re-reads every item's ticked flag and the aggregate, so it never
    holds state of its own. Programmatic updates run under a guard flag
    so they do not re-enter the controller.

    Each row checkbox is bound to its item object, not its position, so
    a row never forwards a click for an item it does not display.
    """

    def __init__(self, controller: SelectionController) -> None:
        self.controller = controller
        self._syncing = False  # Guard flag: suppresses widget->controller callbacks
        self._item_boxes: list[pn.widgets.Checkbox] = []
        self._row_items: list = []
        self._rows = pn.Column(sizing_mode="stretch_width")
        self._build_widgets()

    def _build_widgets(self) -> None:
        config = self.controller.config
        self.tick_all_box = pn.widgets.Checkbox(
            name=config.select_all_label,
            value=self.controller.ticked_all,
        )
        self.tick_all_box.param.watch(self._on_tick_all_changed, "value")
        self._build_rows()

    def _label(self, item: Any) -> str:
        return str(display_value(item, self.controller.config.display_field))

    def _build_rows(self) -> None:
        """(Re)create one checkbox per item in the live collection."""
        items = list(self.controller.store.collection)
        boxes = []
        for item in items:
            box = pn.widgets.Checkbox(name=self._label(item), value=is_ticked(item))
            box.param.watch(lambda event, item=item: self._on_item_changed(item), "value")
            boxes.append(box)
        self._row_items = items
        self._item_boxes = boxes
        self._rows.objects = list(boxes)

    def _rows_stale(self) -> bool:
        """True if the rows no longer mirror the live collection."""
        collection = self.controller.store.collection
        if len(collection) != len(self._row_items):
            return True
        for box, shown, item in zip(self._item_boxes, self._row_items, collection):
            if shown is not item or box.name != self._label(item):
                return True
        return False

    @property
    def item_boxes(self) -> list[pn.widgets.Checkbox]:
        return list(self._item_boxes)

    def _on_item_changed(self, item: Any) -> None:
        if self._syncing:
            return
        if not contains(self.controller.store.collection, item):
            # Row outlived its item: the host replaced or removed it.
            self.refresh()
            return
        try:
            self.controller.handle_item_click(item)
        finally:
            self.refresh()

    def _on_tick_all_changed(self, event) -> None:
        if self._syncing:
            return
        try:
            self.controller.handle_tick_all_click()
        finally:
            self.refresh()

    def refresh(self) -> None:
        """Re-read item and aggregate state into the checkboxes."""
        self._syncing = True
        try:
            if self._rows_stale():
                self._build_rows()
            for box, item in zip(self._item_boxes, self._row_items):
                box.value = is_ticked(item)
            self.tick_all_box.value = self.controller.ticked_all
        finally:
            self._syncing = False

    def build_panel(self) -> pn.Column:
        """Assemble the view into a single Panel layout."""
        return pn.Column(
            self.tick_all_box,
            pn.layout.Divider(),
            self._rows,
            sizing_mode="stretch_width",
        )
