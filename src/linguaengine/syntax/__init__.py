"""Template syntax package.

Provides the lexer, token iterator, parser, operation tree and serializer.
Separate from runtime so tooling (extractors, linters) can parse templates
without rendering them.

Python 3.13+.
"""

from .ast import (
    Capitalize,
    Literal,
    Message,
    Operation,
    Plural,
    PluralBodyElement,
    PluralCase,
    PluralCount,
    Replace,
    Replacement,
    Transformer,
)
from .cursor import Cursor
from .iterator import TokenIterator
from .lexer import Lexer, LexState, lex
from .parser import TemplateParser
from .serializer import SerializationValidationError, serialize
from .tokens import Token

__all__ = [
    "Capitalize",
    "Cursor",
    "LexState",
    "Lexer",
    "Literal",
    "Message",
    "Operation",
    "Plural",
    "PluralBodyElement",
    "PluralCase",
    "PluralCount",
    "Replace",
    "Replacement",
    "SerializationValidationError",
    "TemplateParser",
    "Token",
    "TokenIterator",
    "Transformer",
    "lex",
    "parse",
    "serialize",
]


def parse(source: str) -> Message:
    """Parse a translation template.

    Convenience function for TemplateParser.parse().

    Args:
        source: Raw template text

    Returns:
        Parsed Message

    Raises:
        LinguaLexError: If the template is malformed at character level
        LinguaParseError: If plural cases are malformed or 'other' is missing

    Example:
        >>> from linguaengine.syntax import parse
        >>> message = parse("Hello, :name|capitalize!")
        >>> message.operations[1].key
        'name'
    """
    parser = TemplateParser()
    return parser.parse(source)
