"""SelectConfig: host-supplied delegates and display options."""

from __future__ import annotations

import param


class SelectConfig(param.Parameterized):
    """Configuration for one select-list widget.

    Delegates default to None, which means "not provided" and is
    distinct from a no-op function. Parameters may be reassigned
    after construction (e.g. a host wiring callbacks asynchronously);
    the controller looks them up on every event.
    """

    # --- Delegates ---
    on_item_click = param.Callable(default=None, allow_None=True, doc="fn(item)")
    on_tick_all = param.Callable(default=None, allow_None=True, doc="fn()")

    # --- Display ---
    display_field = param.String(default="name")
    item_template = param.String(
        default=None, allow_None=True,
        doc="Jinja markup rendered per item, with `item` and `index` in context",
    )
    select_all_label = param.String(default="Select all")

    def has_on_item_click(self) -> bool:
        return callable(self.on_item_click)

    def has_on_tick_all(self) -> bool:
        return callable(self.on_tick_all)
