"""Integration tests: the SimpleSelect facade end to end."""

import pandas as pd
import pytest

import simple_select as ss


class TestScenarios:
    def test_clicking_items_one_by_one(self, two_items):
        sel = ss.SimpleSelect(two_items)
        assert sel.has_on_item_click() is False

        sel.handle_item_click(two_items[0])
        assert two_items[0]["ticked"] is True
        assert two_items[1]["ticked"] is False
        assert sel.ticked_all is False

        sel.handle_item_click(two_items[1])
        assert two_items[0]["ticked"] is True
        assert two_items[1]["ticked"] is True
        assert sel.ticked_all is True

    def test_select_all_control(self, two_items, recorder):
        sel = ss.SimpleSelect(two_items, on_tick_all=recorder)
        assert sel.has_on_tick_all() is True
        assert sel.ticked_all is False

        sel.handle_tick_all_click()
        assert [i["ticked"] for i in two_items] == [True, True]
        assert sel.ticked_all is True
        assert recorder.calls == [()]

    def test_item_delegate(self, two_items):
        seen = []
        sel = ss.SimpleSelect(
            two_items, on_item_click=lambda item: seen.append(dict(item)),
        )
        sel.handle_item_click(two_items[0])
        assert seen == [{"name": "item 1", "ticked": True}]
        assert two_items[1]["ticked"] is False


class TestDelegateBinding:
    def test_rejects_non_callable(self, two_items):
        with pytest.raises(TypeError, match="on_tick_all must be callable"):
            ss.SimpleSelect(two_items, on_tick_all="tickedAll")

    def test_bind_later_and_unbind(self, two_items, recorder):
        sel = ss.SimpleSelect(two_items)
        assert sel.on_item_click(recorder) is sel
        sel.handle_item_click(two_items[0])
        sel.on_item_click(None)
        sel.handle_item_click(two_items[0])
        assert recorder.calls == [(two_items[0],)]
        assert sel.has_on_item_click() is False

    def test_bind_tick_all_later(self, two_items, recorder):
        sel = ss.SimpleSelect(two_items).on_tick_all(recorder)
        sel.handle_tick_all_click()
        assert recorder.calls == [()]


class TestState:
    def test_selected(self, mixed_items):
        sel = ss.SimpleSelect(mixed_items)
        assert sel.selected == [mixed_items[0], mixed_items[2]]

    def test_collection_shared(self, two_items):
        sel = ss.SimpleSelect(two_items)
        assert sel.collection is two_items

    def test_repr(self, two_items):
        assert repr(ss.SimpleSelect(two_items)).startswith("SimpleSelect(SelectionStore(")


class TestDataFrame:
    def test_from_dataframe_without_ticked(self):
        df = pd.DataFrame({"name": ["a", "b"], "size": [1, 2]})
        sel = ss.SimpleSelect.from_dataframe(df)
        assert [i["ticked"] for i in sel.collection] == [False, False]
        assert sel.collection[0]["name"] == "a"

    def test_from_dataframe_with_ticked(self):
        df = pd.DataFrame({"name": ["a", "b"], "picked": [True, True]})
        sel = ss.SimpleSelect.from_dataframe(df, ticked_column="picked")
        assert sel.ticked_all is True
        assert "picked" not in sel.collection[0]

    def test_from_dataframe_passes_options(self):
        df = pd.DataFrame({"label": ["a"]})
        sel = ss.SimpleSelect.from_dataframe(df, display_field="label")
        assert "<span>a</span>" in sel.to_html()

    def test_from_dataframe_rejects_list(self):
        with pytest.raises(TypeError, match="pandas DataFrame"):
            ss.SimpleSelect.from_dataframe([{"name": "a"}])

    def test_to_dataframe(self, two_items):
        sel = ss.SimpleSelect(two_items)
        sel.handle_tick_all_click()
        df = sel.to_dataframe()
        assert list(df.columns) == ["name", "ticked"]
        assert df["ticked"].tolist() == [True, True]

    def test_to_dataframe_attribute_items(self, object_items):
        df = ss.SimpleSelect(object_items).to_dataframe()
        assert df["name"].tolist() == ["x", "y"]


class TestRendering:
    def test_to_html_default(self, two_items):
        html = ss.SimpleSelect(two_items).to_html()
        assert "<span>item 1</span>" in html

    def test_to_html_custom_template(self, two_items):
        html = ss.SimpleSelect(two_items, item_template="{{ item.name ~ 'a' }}").to_html()
        assert "<span>item 1a</span>" in html

    def test_to_html_reflects_clicks(self, two_items):
        sel = ss.SimpleSelect(two_items)
        sel.handle_tick_all_click()
        assert 'class="ss-tick-all ticked"' in sel.to_html()

    def test_export_html(self, tmp_path, two_items):
        out = tmp_path / "list.html"
        ss.SimpleSelect(two_items, select_all_label="All").export_html(str(out), title="Items")
        content = out.read_text(encoding="utf-8")
        assert "<title>Items</title>" in content
        assert "<span>All</span>" in content

    def test_show_returns_panel_layout(self, two_items):
        import panel as pn

        layout = ss.SimpleSelect(two_items).show()
        assert isinstance(layout, pn.Column)
