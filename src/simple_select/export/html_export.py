"""HTMLExporter: render the select list as HTML through Jinja2."""

from __future__ import annotations

import pathlib

import jinja2
from markupsafe import Markup

from ..core.config import SelectConfig
from ..core.item import display_value, is_ticked
from ..core.store import SelectionStore

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"

_LIST_CSS = """
.ss-list {
  list-style: none;
  margin: 0;
  padding: 0;
  font-family: system-ui, -apple-system, sans-serif;
  font-size: 13px;
}
.ss-list li {
  padding: 4px 10px;
  cursor: pointer;
  border-radius: 4px;
}
.ss-list li:hover {
  background: #f6f6f7;
}
.ss-list li.ss-tick-all {
  font-weight: 500;
  border-bottom: 1px solid #e0e0e0;
}
.ss-list li.ticked::before {
  content: "\\2713  ";
  color: #0d9488;
}
"""


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=True,
    )


class HTMLExporter:
    """Render a SelectionStore as a list of clickable rows.

    The first ``<li>`` is the "select all" control; each item follows as
    ``<li data-index="i">``. The per-item body is either the item's
    display field or, when ``config.item_template`` is set, that Jinja
    markup rendered with ``item`` and ``index`` in context.
    """

    @staticmethod
    def render(store: SelectionStore, config: SelectConfig | None = None) -> str:
        """Render the list fragment (no page wrapper)."""
        config = config if config is not None else SelectConfig()
        env = _environment()

        item_tpl = None
        if config.item_template is not None:
            item_tpl = env.from_string(config.item_template)

        rows = []
        for i, item in enumerate(store.collection):
            if item_tpl is not None:
                body = Markup(item_tpl.render(item=item, index=i))
            else:
                body = display_value(item, config.display_field)
            rows.append({"index": i, "ticked": is_ticked(item), "body": body})

        return env.get_template("select_list.html.j2").render(
            rows=rows,
            ticked_all=store.ticked_all,
            select_all_label=config.select_all_label,
        )

    @staticmethod
    def export(
        path: str | pathlib.Path,
        store: SelectionStore,
        config: SelectConfig | None = None,
        title: str = "simple-select",
    ) -> None:
        """Write a standalone HTML page containing the list.

        Parameters
        ----------
        path : str or Path
            Output file path.
        store : SelectionStore
        config : SelectConfig, optional
        title : str
            HTML page title.
        """
        path = pathlib.Path(path)
        fragment = HTMLExporter.render(store, config)

        html = _environment().get_template("standalone.html.j2").render(
            title=title,
            css_source=Markup(_LIST_CSS),
            fragment=Markup(fragment),
        )
        path.write_text(html, encoding="utf-8")
