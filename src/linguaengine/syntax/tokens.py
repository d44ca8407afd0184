"""Lexer tokens.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from linguaengine.enums import TokenKind

__all__ = ["Token"]


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexeme of a translation template.

    Attributes:
        kind: Token category
        text: Token text (error tokens carry the error message)
        position: Character offset where the token starts in the template

    Example:
        Template "Hi :name" lexes to:
        Token(TokenKind.LITERAL, "Hi ", 0)
        Token(TokenKind.REPLACEMENT, "name", 4)
    """

    kind: TokenKind
    text: str
    position: int = 0

    def __str__(self) -> str:
        return f"{self.kind}({self.text!r})"
