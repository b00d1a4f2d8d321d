"""Unit tests for pipe table layout."""

import pytest
from utils import table

from hongdown.exceptions import ContractViolationError
from hongdown.renderers.context import RenderContext
from hongdown.renderers.table import alignment_marker, format_table, measure_columns


def _plain_row(row):
    return [cell.children[0].literal for cell in row.children]


@pytest.mark.unit
class TestAlignmentMarker:
    """Test separator row markers."""

    @pytest.mark.parametrize(
        "alignment,width,expected",
        [(None, 3, "---"), ("left", 4, ":---"), ("right", 4, "---:"), ("center", 3, ":-:"), ("center", 6, ":----:")],
    )
    def test_markers(self, alignment, width, expected):
        assert alignment_marker(alignment, width) == expected


@pytest.mark.unit
class TestMeasureColumns:
    """Test column width measurement."""

    def test_minimum_width(self):
        assert measure_columns([["a", ""]], 2) == [3, 3]

    def test_widest_cell(self):
        assert measure_columns([["name", "x"], ["a", "longer"]], 2) == [4, 6]

    def test_display_width(self):
        assert measure_columns([["한국어"]], 1) == [6]

    def test_short_rows(self):
        assert measure_columns([["abcd", "efgh"], ["a"]], 2) == [4, 4]


@pytest.mark.unit
class TestFormatTable:
    """Test complete table rendering."""

    def test_basic(self):
        node = table([["a", "b"], ["1", "22"]], [None, "right"])
        assert format_table(node, _plain_row, RenderContext()) == "| a   | b   |\n| --- | --: |\n| 1   | 22  |"

    def test_alignments(self):
        node = table([["left", "center", "right"]], ["left", "center", "right"])
        expected = "| left | center | right |\n| :--- | :----: | ----: |"
        assert format_table(node, _plain_row, RenderContext()) == expected

    def test_wide_characters(self):
        node = table([["name", "x"], ["한국어", "y"]], [None, None])
        expected = "| name   | x   |\n| ------ | --- |\n| 한국어 | y   |"
        assert format_table(node, _plain_row, RenderContext()) == expected

    def test_pipes_escaped_and_measured(self):
        node = table([["a|b"], ["c"]], [None])
        assert format_table(node, _plain_row, RenderContext()) == "| a\\|b |\n| ---- |\n| c    |"

    def test_short_row_emits_own_cells(self):
        node = table([["a", "b"], ["1"]], [None, None])
        assert format_table(node, _plain_row, RenderContext()) == "| a   | b   |\n| --- | --- |\n| 1   |"

    def test_prefix(self):
        node = table([["a"], ["1"]], [None])
        assert format_table(node, _plain_row, RenderContext(prefix="> ")) == "| a   |\n> | --- |\n> | 1   |"

    def test_empty_table(self):
        node = table([], [])
        assert format_table(node, _plain_row, RenderContext()) == ""

    def test_too_many_cells(self):
        node = table([["a", "b"], ["1", "2", "3"]], [None, None])
        with pytest.raises(ContractViolationError) as exc_info:
            format_table(node, _plain_row, RenderContext())
        assert exc_info.value.rendering_stage == "table"
        assert "row 1" in str(exc_info.value)
