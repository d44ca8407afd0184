"""State-machine lexer for translation templates.

Turns a raw template into a flat tuple of tokens. The lexer is an explicit
LexState enum dispatched in a loop: every state is a method that consumes
characters from an immutable Cursor, appends tokens, and returns the next
state (or None to stop).

States:
    LITERAL       accumulate text until ':' or end of input
    PLACEHOLDER   ':' followed by a lowercase key
    TRANSFORMER   '|name' chain after a key
    PLURAL_ARGS   cases inside 'plural(...)'
    PLURAL_NUMERIC  '=N' or '=N-M' case head
    PLURAL_BODY   '{...}' case body with '#' count markers

Errors end lexing immediately with a terminal ERROR token. No semantic
validation happens here; case structure belongs to the parser.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from enum import Enum, auto

from linguaengine.constants import (
    ESCAPE_CHAR,
    PLACEHOLDER_PREFIX,
    PLURAL_ARG_WHITESPACE,
    PLURAL_ARGS_CLOSE,
    PLURAL_ARGS_OPEN,
    PLURAL_BODY_CLOSE,
    PLURAL_BODY_OPEN,
    PLURAL_COUNT_MARKER,
    PLURAL_EXACT_PREFIX,
    PLURAL_OTHER_KEYWORD,
    PLURAL_RANGE_SEPARATOR,
    TRANSFORMER_SEPARATOR,
)
from linguaengine.diagnostics import Diagnostic, ErrorTemplate, LinguaLexError
from linguaengine.enums import TokenKind, TransformerName
from linguaengine.syntax.cursor import Cursor
from linguaengine.syntax.tokens import Token

__all__ = ["LexState", "Lexer", "is_digit", "is_key_char", "lex"]


def is_key_char(char: str) -> bool:
    """Check if char may appear in a replacement key or transformer name (a-z)."""
    return "a" <= char <= "z"


def is_digit(char: str) -> bool:
    """Check if char is an ASCII digit.

    str.isdigit() accepts other Unicode digits, which int() would then
    interpret; plural case values are ASCII only.
    """
    return "0" <= char <= "9"


class LexState(Enum):
    """Lexer states."""

    LITERAL = auto()
    PLACEHOLDER = auto()
    TRANSFORMER = auto()
    PLURAL_ARGS = auto()
    PLURAL_NUMERIC = auto()
    PLURAL_BODY = auto()


class Lexer:
    """Translation template lexer.

    tokenize() never raises: on malformed input the returned tuple ends with
    an ERROR token and the structured error is available as ``diagnostic``.
    Use the module-level lex() to get an exception instead.

    Example:
        >>> [t.kind.value for t in Lexer("Hi :name|capitalize!").tokenize()]
        ['literal', 'replacement', 'transformer', 'literal']
    """

    __slots__ = (
        "_cursor",
        "_diagnostic",
        "_literal",
        "_literal_start",
        "_source",
        "_states",
        "_tokens",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = Cursor(source, 0)
        self._tokens: list[Token] = []
        self._literal: list[str] = []
        self._literal_start = 0
        self._diagnostic: Diagnostic | None = None
        self._states: dict[LexState, Callable[[], LexState | None]] = {
            LexState.LITERAL: self._lex_literal,
            LexState.PLACEHOLDER: self._lex_placeholder,
            LexState.TRANSFORMER: self._lex_transformer,
            LexState.PLURAL_ARGS: self._lex_plural_args,
            LexState.PLURAL_NUMERIC: self._lex_plural_numeric,
            LexState.PLURAL_BODY: self._lex_plural_body,
        }

    @property
    def source(self) -> str:
        """Template being lexed."""
        return self._source

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Error from the last tokenize() call, or None on success."""
        return self._diagnostic

    def tokenize(self) -> tuple[Token, ...]:
        """Lex the whole template.

        Returns:
            Tokens in source order. Ends with an ERROR token on failure.
        """
        self._cursor = Cursor(self._source, 0)
        self._tokens = []
        self._literal = []
        self._diagnostic = None

        state: LexState | None = LexState.LITERAL
        while state is not None:
            state = self._states[state]()
        return tuple(self._tokens)

    # ------------------------------------------------------------------
    # Token buffer
    # ------------------------------------------------------------------

    def _emit(self, kind: TokenKind, text: str, position: int) -> None:
        self._tokens.append(Token(kind, text, position))

    def _append_literal(self, text: str, position: int) -> None:
        if not self._literal:
            self._literal_start = position
        self._literal.append(text)

    def _flush_literal(self) -> None:
        # Empty literal runs are never emitted
        if self._literal:
            self._emit(TokenKind.LITERAL, "".join(self._literal), self._literal_start)
            self._literal = []

    def _fail(self, diagnostic: Diagnostic) -> None:
        self._literal = []
        self._diagnostic = diagnostic
        position = diagnostic.span.start if diagnostic.span else self._cursor.pos
        self._emit(TokenKind.ERROR, diagnostic.message, position)

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _lex_literal(self) -> LexState | None:
        cursor = self._cursor
        while not cursor.is_eof:
            char = cursor.current
            if char == ESCAPE_CHAR and cursor.peek(1) == PLACEHOLDER_PREFIX:
                # Escaped colon: backslash dropped
                self._append_literal(PLACEHOLDER_PREFIX, cursor.pos)
                cursor = cursor.advance(2)
                continue
            if char == PLACEHOLDER_PREFIX:
                self._cursor = cursor
                return LexState.PLACEHOLDER
            self._append_literal(char, cursor.pos)
            cursor = cursor.advance()

        self._cursor = cursor
        self._flush_literal()
        return None

    def _lex_placeholder(self) -> LexState | None:
        colon = self._cursor
        key_start = colon.advance()
        key, after = key_start.take_while(is_key_char)

        if not key:
            # Not a placeholder: the colon stays in the literal text and the
            # following character is lexed normally.
            self._append_literal(PLACEHOLDER_PREFIX, colon.pos)
            self._cursor = key_start
            return LexState.LITERAL

        self._flush_literal()
        self._emit(TokenKind.REPLACEMENT, key, key_start.pos)
        self._cursor = after
        return LexState.TRANSFORMER

    def _lex_transformer(self) -> LexState | None:
        cursor = self._cursor
        if cursor.peek() != TRANSFORMER_SEPARATOR:
            return LexState.LITERAL

        name_start = cursor.advance()
        name, after = name_start.take_while(is_key_char)
        if not name:
            self._fail(ErrorTemplate.transformer_name_expected(name_start.span()))
            return None

        match name:
            case TransformerName.CAPITALIZE | TransformerName.REPLACE:
                self._emit(TokenKind.TRANSFORMER, name, name_start.pos)
                self._cursor = after
                return LexState.TRANSFORMER
            case TransformerName.PLURAL:
                if after.peek() != PLURAL_ARGS_OPEN:
                    self._fail(ErrorTemplate.plural_open_paren_expected(after.span()))
                    return None
                self._emit(TokenKind.TRANSFORMER, name, name_start.pos)
                self._cursor = after.advance()
                return LexState.PLURAL_ARGS
            case _:
                self._fail(ErrorTemplate.unknown_transformer(name, name_start.span(len(name))))
                return None

    def _lex_plural_args(self) -> LexState | None:
        cursor = self._cursor.skip_whitespace(PLURAL_ARG_WHITESPACE)
        if cursor.is_eof:
            self._fail(ErrorTemplate.plural_args_unexpected_eof(cursor.span(0)))
            return None

        char = cursor.current
        if char == PLURAL_ARGS_CLOSE:
            self._cursor = cursor.advance()
            return LexState.TRANSFORMER
        if char == PLURAL_EXACT_PREFIX:
            self._cursor = cursor
            return LexState.PLURAL_NUMERIC
        if cursor.starts_with(PLURAL_OTHER_KEYWORD):
            self._emit(TokenKind.PLURAL_OTHER, PLURAL_OTHER_KEYWORD, cursor.pos)
            self._cursor = cursor.advance(len(PLURAL_OTHER_KEYWORD))
            return LexState.PLURAL_BODY

        self._fail(ErrorTemplate.plural_args_unexpected_char(char, cursor.span()))
        return None

    def _lex_plural_numeric(self) -> LexState | None:
        low_start = self._cursor.advance()  # skip '='
        digits, cursor = low_start.take_while(is_digit)
        if not digits:
            self._fail(ErrorTemplate.plural_number_expected(PLURAL_EXACT_PREFIX, low_start.span()))
            return None
        self._emit(TokenKind.PLURAL_NUMERIC, digits, low_start.pos)

        if cursor.peek() == PLURAL_RANGE_SEPARATOR:
            self._emit(TokenKind.PLURAL_RANGE, PLURAL_RANGE_SEPARATOR, cursor.pos)
            high_start = cursor.advance()
            digits, cursor = high_start.take_while(is_digit)
            if not digits:
                self._fail(
                    ErrorTemplate.plural_number_expected(PLURAL_RANGE_SEPARATOR, high_start.span())
                )
                return None
            self._emit(TokenKind.PLURAL_NUMERIC, digits, high_start.pos)

        self._cursor = cursor
        return LexState.PLURAL_BODY

    def _lex_plural_body(self) -> LexState | None:
        cursor = self._cursor.skip_whitespace(PLURAL_ARG_WHITESPACE)
        if cursor.peek() != PLURAL_BODY_OPEN:
            self._fail(ErrorTemplate.plural_body_start_expected(cursor.span()))
            return None

        self._emit(TokenKind.PLURAL_START, PLURAL_BODY_OPEN, cursor.pos)
        cursor = cursor.advance()

        while not cursor.is_eof:
            char = cursor.current
            if char == PLURAL_COUNT_MARKER:
                self._flush_literal()
                self._emit(TokenKind.PLURAL_COUNT, PLURAL_COUNT_MARKER, cursor.pos)
            elif char == PLURAL_BODY_CLOSE:
                self._flush_literal()
                self._emit(TokenKind.PLURAL_END, PLURAL_BODY_CLOSE, cursor.pos)
                self._cursor = cursor.advance()
                return LexState.PLURAL_ARGS
            else:
                self._append_literal(char, cursor.pos)
            cursor = cursor.advance()

        self._cursor = cursor
        self._fail(ErrorTemplate.plural_body_unexpected_eof(cursor.span(0)))
        return None


def lex(source: str) -> tuple[Token, ...]:
    """Lex a template, raising on malformed input.

    Args:
        source: Raw template text

    Returns:
        Tokens in source order (no ERROR token)

    Raises:
        LinguaLexError: If the template is malformed

    Example:
        >>> [(t.kind.value, t.text) for t in lex("Hi \\\\:name")]
        [('literal', 'Hi :name')]
    """
    lexer = Lexer(source)
    tokens = lexer.tokenize()
    if lexer.diagnostic is not None:
        raise LinguaLexError(lexer.diagnostic, source=source)
    return tokens
