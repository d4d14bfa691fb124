#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_prefix_stack.py
"""Unit tests for the line prefix stack."""

import pytest

from mdunwrap.exceptions import RenderingError
from mdunwrap.renderers.prefix import PrefixStack


@pytest.mark.unit
class TestPrefixStack:
    """Test push, pop and the current prefix."""

    def test_empty_stack(self):
        stack = PrefixStack()
        assert stack.current() == ""
        assert stack.trimmed_for_blank_line() == ""
        assert not stack
        assert len(stack) == 0

    def test_current_concatenates_root_first(self):
        stack = PrefixStack()
        stack.push("> ")
        stack.push("  ")
        stack.push("   ")
        assert stack.current() == ">      "
        assert list(stack) == ["> ", "  ", "   "]
        assert stack.depth == 3

    def test_pop_returns_innermost(self):
        stack = PrefixStack()
        stack.push("> ")
        stack.push("  ")
        assert stack.pop() == "  "
        assert stack.current() == "> "

    def test_pop_empty_raises(self):
        with pytest.raises(RenderingError):
            PrefixStack().pop()


@pytest.mark.unit
class TestTrimmedForBlankLine:
    """Test the prefix used for blank separator lines."""

    def test_only_indentation_gives_empty_string(self):
        stack = PrefixStack()
        stack.push("  ")
        stack.push("   ")
        assert stack.trimmed_for_blank_line() == ""

    def test_quote_inside_item(self):
        stack = PrefixStack()
        stack.push("  ")
        stack.push("> ")
        assert stack.trimmed_for_blank_line() == "  >"

    def test_item_inside_quote(self):
        stack = PrefixStack()
        stack.push("> ")
        stack.push("  ")
        assert stack.trimmed_for_blank_line() == ">"

    def test_nested_quotes_keep_outer_entries_verbatim(self):
        stack = PrefixStack()
        stack.push("> ")
        stack.push("> ")
        assert stack.trimmed_for_blank_line() == "> >"

    def test_trimmed_never_has_trailing_whitespace(self):
        stack = PrefixStack()
        for entry in ["> ", "    ", "> ", "  "]:
            stack.push(entry)
            trimmed = stack.trimmed_for_blank_line()
            assert trimmed == trimmed.rstrip()

    def test_does_not_modify_stack(self):
        stack = PrefixStack()
        stack.push("> ")
        stack.push("  ")
        stack.trimmed_for_blank_line()
        assert stack.current() == ">   "
