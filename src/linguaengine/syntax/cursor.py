"""Immutable cursor over template source.

The lexer threads a Cursor through its states instead of mutating an index.
Python 3.13+. Zero external dependencies.

Design:
    - Cursor is a frozen dataclass; advance() returns a new cursor
    - EOF is a state (is_eof), not a return value
    - Line:column is computed on demand, only when reporting errors

Line Ending Support:
    \\n is the line delimiter. CRLF templates work because the \\n is
    still present; CR-only line endings produce incorrect line numbers.
"""

from collections.abc import Callable
from dataclasses import dataclass

from linguaengine.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hi :name", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(3).current
        ':'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def starts_with(self, text: str) -> bool:
        """Check whether the source continues with text at this position."""
        return self.source.startswith(text, self.pos)

    def take_while(self, predicate: Callable[[str], bool]) -> tuple[str, "Cursor"]:
        """Consume the longest run of characters matching predicate.

        Returns:
            (consumed text, cursor after the run)

        Example:
            >>> run, rest = Cursor("name|x", 0).take_while(str.islower)
            >>> run, rest.pos
            ('name', 4)
        """
        end = self.pos
        source = self.source
        while end < len(source) and predicate(source[end]):
            end += 1
        return source[self.pos : end], Cursor(source, end)

    def skip_whitespace(self, chars: frozenset[str]) -> "Cursor":
        """Skip any characters contained in chars."""
        c = self
        while not c.is_eof and c.current in chars:
            c = c.advance()
        return c

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("a\\nbc", 3).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 1) -> SourceSpan:
        """Build a SourceSpan starting at the current position."""
        line, column = self.compute_line_col()
        end = min(self.pos + length, len(self.source))
        return SourceSpan(start=self.pos, end=max(end, self.pos), line=line, column=column)
