"""Tests for the table model (core/table_state.py).

Covers title/headings enable rules, index clamping for insertion and
removal, ``clear`` scope, and style upserts.
"""

from __future__ import annotations

import pytest

from tablecraft.core.models import BorderStyle, TableStyle
from tablecraft.core.table_state import TableState


def _state_with_rows(*rows: list[str]) -> TableState:
    state = TableState()
    for row in rows:
        state.insert_row(row)
    return state


class TestDefaults:
    def test_fresh_state(self) -> None:
        state = TableState()
        assert state.title == ""
        assert not state.title_enabled
        assert state.headings == []
        assert not state.headings_enabled
        assert state.rows == []
        assert state.style == TableStyle(border=BorderStyle.ASCII)

    def test_empty_table_renders_nothing(self) -> None:
        assert TableState().render() == ""


# ---------------------------------------------------------------------------
# Title / headings
# ---------------------------------------------------------------------------

class TestTitle:
    def test_set_enables(self) -> None:
        state = TableState()
        state.set_title("Inventory")
        assert state.title == "Inventory"
        assert state.title_enabled

    def test_empty_disables_and_keeps_text(self) -> None:
        state = TableState()
        state.set_title("Inventory")
        state.set_title("")
        assert not state.title_enabled
        assert state.title == "Inventory"

    def test_render_includes_title_only_when_enabled(self) -> None:
        state = _state_with_rows(["a"])
        state.set_title("Inventory")
        assert "Inventory" in state.render()
        state.set_title("")
        assert "Inventory" not in state.render()


class TestHeadings:
    def test_set_enables(self) -> None:
        state = TableState()
        state.set_headings(["Name", "Qty"])
        assert state.headings == ["Name", "Qty"]
        assert state.headings_enabled

    def test_empty_disables(self) -> None:
        state = TableState()
        state.set_headings(["Name"])
        state.set_headings([])
        assert not state.headings_enabled

    def test_headings_are_copied(self) -> None:
        headings = ["Name"]
        state = TableState()
        state.set_headings(headings)
        headings.append("Qty")
        assert state.headings == ["Name"]


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

class TestInsertRow:
    def test_default_appends(self) -> None:
        state = _state_with_rows(["a"], ["b"])
        assert state.insert_row(["c"]) == 2
        assert state.rows == [["a"], ["b"], ["c"]]

    def test_in_range_index_inserts(self) -> None:
        state = _state_with_rows(["a"], ["c"])
        state.insert_row(["b"], 1)
        assert state.rows == [["a"], ["b"], ["c"]]

    def test_sequential_inserts_follow_list_semantics(self) -> None:
        state = TableState()
        expected: list[list[str]] = []
        for index, value in [(0, "x"), (0, "y"), (1, "z"), (3, "w"), (2, "v")]:
            state.insert_row([value], index)
            expected.insert(index, [value])
        assert state.rows == expected

    def test_index_past_end_appends(self) -> None:
        state = _state_with_rows(["a"])
        assert state.insert_row(["b"], 99) == 1
        assert state.rows == [["a"], ["b"]]

    def test_negative_index_clamps_to_start(self) -> None:
        state = _state_with_rows(["a"], ["b"])
        assert state.insert_row(["z"], -1) == 0
        assert state.rows[0] == ["z"]

    def test_rows_may_differ_in_length(self) -> None:
        state = _state_with_rows(["a"], ["b", "c", "d"])
        rendered = state.render()
        assert "d" in rendered
        assert len(state.rows[0]) == 1


class TestRemoveRow:
    def test_default_removes_last(self) -> None:
        state = _state_with_rows(["a"], ["b"])
        assert state.remove_row() == ["b"]
        assert state.rows == [["a"]]

    def test_index_removes_that_row(self) -> None:
        state = _state_with_rows(["a"], ["b"], ["c"])
        assert state.remove_row(1) == ["b"]
        assert state.rows == [["a"], ["c"]]

    @pytest.mark.parametrize("index", [3, 4, 100])
    def test_index_past_end_removes_last(self, index: int) -> None:
        state = _state_with_rows(["a"], ["b"], ["c"])
        assert state.remove_row(index) == ["c"]

    def test_negative_index_removes_first(self) -> None:
        state = _state_with_rows(["a"], ["b"])
        assert state.remove_row(-5) == ["a"]

    def test_empty_table_is_noop(self) -> None:
        state = TableState()
        assert state.remove_row() is None
        assert state.remove_row(3) is None
        assert state.rows == []


class TestClear:
    def test_only_rows_are_reset(self) -> None:
        state = _state_with_rows(["a"], ["b"])
        state.set_title("T")
        state.set_headings(["H"])
        state.set_style_option("border", BorderStyle.UNICODE)
        state.clear()
        assert state.rows == []
        assert state.title_enabled
        assert state.headings == ["H"]
        assert state.style.border is BorderStyle.UNICODE


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

class TestStyleOption:
    def test_upsert_border(self) -> None:
        state = TableState()
        state.set_style_option("border", BorderStyle.MARKDOWN)
        assert state.style.border is BorderStyle.MARKDOWN
        assert state.style.all_separators is False

    def test_upsert_all_separators(self) -> None:
        state = TableState()
        state.set_style_option("all_separators", True)
        assert state.style.all_separators is True
        assert state.style.border is BorderStyle.ASCII

    def test_unknown_option(self) -> None:
        with pytest.raises(KeyError):
            TableState().set_style_option("padding", 2)


class TestRender:
    def test_deterministic(self) -> None:
        state = _state_with_rows(["a", "b"], ["c"])
        state.set_title("T")
        assert state.render() == state.render()

    def test_style_changes_glyphs_not_content(self) -> None:
        state = _state_with_rows(["alpha", "beta"])
        ascii_text = state.render()
        state.set_style_option("border", BorderStyle.UNICODE)
        unicode_text = state.render()
        assert ascii_text != unicode_text
        assert "alpha" in unicode_text and "beta" in unicode_text
