"""Unit tests for fenced code block formatting."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hongdown.options.config import CodeBlockConfig
from hongdown.renderers.code import (
    format_code_block,
    longest_leading_fence_run,
    select_fence,
    split_code_lines,
)
from hongdown.renderers.context import RenderContext


@pytest.mark.unit
class TestSplitCodeLines:
    """Test splitting code literals into lines."""

    def test_drops_final_terminator(self):
        assert split_code_lines("a\n\nb\n") == ["a", "", "b"]

    def test_without_final_terminator(self):
        assert split_code_lines("a\nb") == ["a", "b"]

    def test_empty(self):
        assert split_code_lines("") == []

    def test_crlf(self):
        assert split_code_lines("a\r\nb\r\n") == ["a", "b"]

    def test_trailing_blank_line_kept(self):
        assert split_code_lines("a\n\n") == ["a", ""]


@pytest.mark.unit
class TestFenceSelection:
    """Test fence length and character selection."""

    def test_leading_run(self):
        assert longest_leading_fence_run(["~~~", "x ~~~~~"], "~") == 3

    def test_indented_run_counts(self):
        assert longest_leading_fence_run(["   ~~~~~~"], "~") == 6

    def test_minimum_length(self):
        assert select_fence(["x"], "", CodeBlockConfig()) == "~~~~"

    def test_longer_than_content_run(self):
        assert select_fence(["~~~~~"], "", CodeBlockConfig()) == "~~~~~~"

    def test_other_fence_char_ignored(self):
        assert select_fence(["``````"], "", CodeBlockConfig()) == "~~~~"

    def test_backtick_fence(self):
        config = CodeBlockConfig(fence_char="`", min_fence_length=3)
        assert select_fence(["````"], "py", config) == "`````"

    def test_backtick_in_info_falls_back_to_tildes(self):
        config = CodeBlockConfig(fence_char="`")
        assert select_fence(["x"], "a`b", config) == "~~~~"


@pytest.mark.unit
class TestFormatCodeBlock:
    """Test complete code block rendering."""

    def test_basic(self):
        result = format_code_block("print(1)\n", "python", CodeBlockConfig(), RenderContext())
        assert result == "~~~~ python\nprint(1)\n~~~~"

    def test_default_language(self):
        assert format_code_block("x\n", "", CodeBlockConfig(), RenderContext()) == "~~~~ text\nx\n~~~~"

    def test_no_default_language(self):
        config = CodeBlockConfig(default_language="")
        assert format_code_block("x\n", "", config, RenderContext()) == "~~~~\nx\n~~~~"

    def test_no_space_after_fence(self):
        config = CodeBlockConfig(space_after_fence=False)
        assert format_code_block("x\n", "py", config, RenderContext()) == "~~~~py\nx\n~~~~"

    def test_content_fence_lengthens(self):
        result = format_code_block("~~~~~\n", "", CodeBlockConfig(), RenderContext())
        assert result == "~~~~~~ text\n~~~~~\n~~~~~~"

    def test_empty_content(self):
        assert format_code_block("", "sh", CodeBlockConfig(), RenderContext()) == "~~~~ sh\n~~~~"

    def test_info_whitespace_stripped(self):
        assert format_code_block("x\n", "  rust ", CodeBlockConfig(), RenderContext()) == "~~~~ rust\nx\n~~~~"

    def test_prefixed_context(self):
        ctx = RenderContext(prefix="> ")
        result = format_code_block("a\n\nb\n", "", CodeBlockConfig(), ctx)
        assert result == "~~~~ text\n> a\n>\n> b\n> ~~~~"

    def test_list_item_context(self):
        ctx = RenderContext(prefix="    ")
        result = format_code_block("a\n\n  b\n", "py", CodeBlockConfig(), ctx)
        assert result == "~~~~ py\n    a\n\n      b\n    ~~~~"


@pytest.mark.unit
class TestFenceProperties:
    """Property checks on fence selection."""

    @given(st.lists(st.text(alphabet="~` ab", max_size=12), max_size=6), st.sampled_from(["~", "`"]))
    def test_no_content_line_closes_the_fence(self, lines, fence_char):
        fence = select_fence(lines, "", CodeBlockConfig(fence_char=fence_char))
        assert len(fence) >= 4
        for line in lines:
            assert not line.lstrip(" ").startswith(fence)
