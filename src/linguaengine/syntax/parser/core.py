"""Template parser entry point.

TemplateParser lexes a template with :mod:`linguaengine.syntax.lexer` and
walks the tokens with the rules in :mod:`linguaengine.syntax.parser.rules`,
producing an immutable :class:`~linguaengine.syntax.ast.Message`.

Security:
    Includes a configurable input size limit; a single translation string
    larger than that is rejected before lexing.
"""

from collections.abc import Sequence

from linguaengine.constants import MAX_SOURCE_SIZE
from linguaengine.syntax.ast import Message
from linguaengine.syntax.iterator import TokenIterator
from linguaengine.syntax.lexer import lex
from linguaengine.syntax.parser.rules import ParseContext, parse_operations
from linguaengine.syntax.tokens import Token

__all__ = ["TemplateParser"]


class TemplateParser:
    """Translation template parser.

    Errors are fatal to the template being parsed: the first lex or parse
    error is raised. Callers parsing a whole translation file decide
    whether to continue with the next key.

    Attributes:
        max_source_size: Maximum allowed template size in characters
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum template size in characters (default: 1 MB).
                             Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed template size in characters."""
        return self._max_source_size

    def __repr__(self) -> str:
        return f"TemplateParser(max_source_size={self._max_source_size})"

    def parse(self, source: str) -> Message:
        """Parse a template into a Message.

        Args:
            source: Raw template text

        Returns:
            Parsed Message (empty template -> no operations)

        Raises:
            ValueError: If source exceeds max_source_size
            LinguaLexError: If the template is malformed at character level
            LinguaParseError: If plural cases are malformed or 'other' is missing

        Example:
            >>> parser = TemplateParser()
            >>> parser.parse("Hi :name").operations
            (Literal(value='Hi '), Replacement(key='name', transformers=()))
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Template size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in TemplateParser constructor to increase limit."
            )
            raise ValueError(msg)

        return self.parse_tokens(lex(source), source=source)

    def parse_tokens(self, tokens: Sequence[Token], *, source: str = "") -> Message:
        """Parse an already lexed token sequence.

        Args:
            tokens: Tokens without a trailing ERROR token
            source: Template text the tokens came from (for error positions)

        Raises:
            LinguaParseError: If the token structure is invalid
        """
        context = ParseContext(TokenIterator(tokens), source)
        return Message(parse_operations(context))
