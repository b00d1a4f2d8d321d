"""Unit tests for the immutable render context."""

from dataclasses import FrozenInstanceError

import pytest

from hongdown.renderers.context import RenderContext


@pytest.mark.unit
class TestRenderContext:
    """Test scope transitions of the render context."""

    def test_defaults(self):
        ctx = RenderContext()
        assert ctx.prefix == ""
        assert ctx.list_depth == 0
        assert not ctx.in_block_quote

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            RenderContext().prefix = "x"  # type: ignore[misc]

    def test_blank_line_strips_trailing_whitespace(self):
        assert RenderContext(prefix="> > ").blank_line == "> >"
        assert RenderContext(prefix="    ").blank_line == ""

    def test_line_prefix(self):
        ctx = RenderContext(prefix="> ")
        assert ctx.line_prefix("text") == "> "
        assert ctx.line_prefix("") == ">"

    def test_block_separator_loose(self):
        assert RenderContext(prefix="> ").block_separator == "\n>\n> "

    def test_block_separator_tight(self):
        assert RenderContext(prefix="    ", tight=True).block_separator == "\n    "

    def test_enter_block_quote(self):
        outer = RenderContext(prefix="    ", tight=True)
        inner = outer.enter_block_quote()
        assert inner.prefix == "    > "
        assert inner.in_block_quote
        assert not inner.tight
        assert outer.prefix == "    "

    def test_enter_list_counts_depths(self):
        ctx = RenderContext().enter_list(ordered=True, tight=True)
        ctx = ctx.enter_list(ordered=False, tight=False)
        ctx = ctx.enter_list(ordered=True, tight=True)
        assert ctx.list_depth == 3
        assert ctx.ordered_depth == 2
        assert ctx.ordered
        assert ctx.tight

    def test_alternate_marker(self):
        parent = RenderContext().with_alternate_marker(True)
        assert parent.alternate_marker
        assert parent.enter_list(ordered=False, tight=True, alternate_marker=True).alternate_marker
        assert not parent.enter_list(ordered=False, tight=True).alternate_marker
        assert not RenderContext().alternate_marker

    def test_with_ordinal(self):
        ctx = RenderContext().enter_list(ordered=True, tight=True).with_ordinal(7)
        assert ctx.ordinal == 7

    def test_enter_list_item_indents(self):
        ctx = RenderContext(prefix="> ").enter_list_item(4)
        assert ctx.prefix == ">     "

    def test_enter_single_line(self):
        assert RenderContext().enter_single_line().single_line
