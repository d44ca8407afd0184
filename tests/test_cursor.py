"""Tests for the immutable source cursor."""

from __future__ import annotations

import pytest

from linguaengine.syntax import Cursor


class TestCursor:
    """Test cursor navigation and spans."""

    def test_advance_returns_new_cursor(self) -> None:
        """Cursors are immutable."""
        cursor = Cursor("abc", 0)
        moved = cursor.advance()

        assert cursor.pos == 0
        assert moved.current == "b"

    def test_eof(self) -> None:
        """current raises at the end; peek returns None."""
        cursor = Cursor("a", 1)

        assert cursor.is_eof
        assert cursor.peek() is None
        with pytest.raises(EOFError):
            _ = cursor.current

    def test_take_while(self) -> None:
        """take_while returns the run and the cursor after it."""
        text, rest = Cursor("name|x", 0).take_while(str.isalpha)

        assert text == "name"
        assert rest.current == "|"

    def test_skip_whitespace(self) -> None:
        """Only the given characters are skipped."""
        cursor = Cursor(" \t\nx", 0).skip_whitespace(frozenset(" \t\n"))
        assert cursor.current == "x"

    def test_starts_with(self) -> None:
        """starts_with checks text at the current position."""
        assert Cursor("(other {x})", 1).starts_with("other")

    def test_span_line_and_column(self) -> None:
        """Spans carry 1-based line and column."""
        span = Cursor("ab\ncd", 4).span()

        assert (span.start, span.end, span.line, span.column) == (4, 5, 2, 2)

    def test_span_at_end(self) -> None:
        """A span at the end of input is empty."""
        span = Cursor("ab", 2).span()
        assert (span.start, span.end) == (2, 2)
