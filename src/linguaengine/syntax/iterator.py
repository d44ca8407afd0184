"""Restartable cursor over a token tuple.

Lookahead of one, used by the parser. Out-of-range access returns None
instead of raising.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Sequence

from linguaengine.syntax.tokens import Token

__all__ = ["TokenIterator"]


class TokenIterator[T = Token]:
    """Cursor over an immutable token sequence.

    Starts before the first token: current() is None until next() is called.

    Example:
        >>> it = TokenIterator(("a", "b"))
        >>> it.peek(), it.next(), it.current(), it.has_next()
        ('a', 'a', 'a', True)
        >>> it.next(), it.next(), it.has_next()
        ('b', None, False)
    """

    __slots__ = ("_index", "_tokens")

    def __init__(self, tokens: Sequence[T]) -> None:
        self._tokens = tuple(tokens)
        self._index = -1

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    @property
    def position(self) -> int:
        """Index of the current token (-1 before the first)."""
        return self._index

    def has_next(self) -> bool:
        """Check if another token follows the current one."""
        return self._index + 1 < len(self._tokens)

    def peek(self) -> T | None:
        """Return the next token without advancing."""
        if not self.has_next():
            return None
        return self._tokens[self._index + 1]

    def next(self) -> T | None:
        """Advance and return the new current token.

        At the end the position stays past the last token and None is returned.
        """
        if not self.has_next():
            self._index = len(self._tokens)
            return None
        self._index += 1
        return self._tokens[self._index]

    def current(self) -> T | None:
        """Return the token at the current position."""
        if 0 <= self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def reset(self) -> None:
        """Move back before the first token."""
        self._index = -1
