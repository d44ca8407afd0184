"""Grammar rules for the template parser.

Recursive descent over the token tuple produced by the lexer:

    operations  := (literal | replacement)*
    replacement := REPLACEMENT transformer*
    transformer := TRANSFORMER('capitalize') | TRANSFORMER('replace')
                 | TRANSFORMER('plural') plural-case*
    plural-case := (NUMERIC | NUMERIC RANGE NUMERIC | OTHER)
                   PLURAL_START (LITERAL | PLURAL_COUNT)* PLURAL_END

The parser is purely structural: overlapping or reversed ranges are kept
as written and duplicate keys are legal.
"""

from dataclasses import dataclass

from linguaengine.diagnostics import Diagnostic, ErrorTemplate, LinguaParseError, SourceSpan
from linguaengine.enums import MatchKind, TokenKind, TransformerName
from linguaengine.syntax.ast import (
    Capitalize,
    Literal,
    Operation,
    Plural,
    PluralBodyElement,
    PluralCase,
    PluralCount,
    Replace,
    Replacement,
    Transformer,
)
from linguaengine.syntax.cursor import Cursor
from linguaengine.syntax.iterator import TokenIterator
from linguaengine.syntax.tokens import Token

_CASE_HEAD_KINDS = frozenset({TokenKind.PLURAL_NUMERIC, TokenKind.PLURAL_OTHER})


@dataclass(slots=True)
class ParseContext:
    """Explicit state for one parse.

    Attributes:
        tokens: Iterator over the lexed tokens
        source: Template text, used to compute line:column for errors
    """

    tokens: TokenIterator[Token]
    source: str = ""

    def span_at(self, token: Token | None) -> SourceSpan:
        """Source span of token, or of the end of input when token is None."""
        if token is None:
            return Cursor(self.source, len(self.source)).span(0)
        position = min(token.position, len(self.source))
        return Cursor(self.source, position).span(len(token.text))

    def error(self, diagnostic: Diagnostic) -> LinguaParseError:
        """Build the exception for diagnostic."""
        return LinguaParseError(diagnostic, source=self.source)


@dataclass(frozen=True, slots=True)
class _DefaultCase:
    """Parsed 'other {...}' case before it is attached to its Plural."""

    body: tuple[PluralBodyElement, ...]


def parse_operations(ctx: ParseContext) -> tuple[Operation, ...]:
    """Parse the whole token stream into top-level operations."""
    operations: list[Operation] = []
    while (token := ctx.tokens.next()) is not None:
        match token.kind:
            case TokenKind.LITERAL:
                operations.append(Literal(token.text))
            case TokenKind.REPLACEMENT:
                operations.append(Replacement(token.text, parse_transformer_chain(ctx, token)))
            case _:
                raise ctx.error(ErrorTemplate.unexpected_token(token.kind, ctx.span_at(token)))
    return tuple(operations)


def parse_transformer_chain(ctx: ParseContext, key: Token) -> tuple[Transformer, ...]:
    """Parse transformers following a replacement key.

    Stops at the first token that is not a transformer name.
    """
    chain: list[Transformer] = []
    while (token := ctx.tokens.peek()) is not None and token.kind is TokenKind.TRANSFORMER:
        ctx.tokens.next()
        match token.text:
            case TransformerName.CAPITALIZE:
                chain.append(Capitalize())
            case TransformerName.REPLACE:
                chain.append(Replace())
            case TransformerName.PLURAL:
                chain.append(parse_plural(ctx, key))
            case _:
                raise ctx.error(ErrorTemplate.unknown_transformer(token.text, ctx.span_at(token)))
    return tuple(chain)


def parse_plural(ctx: ParseContext, key: Token) -> Plural:
    """Parse plural cases until no case head follows.

    The 'other' case is kept apart from the guarded cases; a later 'other'
    replaces an earlier one.

    Raises:
        LinguaParseError: If no non-empty 'other' case was found
    """
    cases: list[PluralCase] = []
    other: tuple[PluralBodyElement, ...] = ()

    while (token := ctx.tokens.peek()) is not None and token.kind in _CASE_HEAD_KINDS:
        case = parse_plural_case(ctx)
        if isinstance(case, _DefaultCase):
            other = case.body
        else:
            cases.append(case)

    if not other:
        raise ctx.error(ErrorTemplate.plural_other_missing(key.text, ctx.span_at(key)))
    return Plural(tuple(cases), other)


def parse_plural_case(ctx: ParseContext) -> PluralCase | _DefaultCase:
    """Parse one case head and its body.

    Heads:
        NUMERIC                   -> EXACT
        NUMERIC RANGE NUMERIC     -> RANGE
        OTHER                     -> default case
    """
    head = ctx.tokens.next()
    match_kind: MatchKind | None = None
    low = high = 0

    if head is None:
        raise ctx.error(ErrorTemplate.plural_translation_start_expected(None, ctx.span_at(None)))

    match head.kind:
        case TokenKind.PLURAL_OTHER:
            pass
        case TokenKind.PLURAL_NUMERIC:
            match_kind = MatchKind.EXACT
            low = high = _parse_int(ctx, head)
            following = ctx.tokens.peek()
            if following is not None and following.kind is TokenKind.PLURAL_RANGE:
                ctx.tokens.next()
                upper = ctx.tokens.next()
                if upper is None or upper.kind is not TokenKind.PLURAL_NUMERIC:
                    raise ctx.error(_head_error(ctx, upper))
                match_kind = MatchKind.RANGE
                high = _parse_int(ctx, upper)
        case _:
            raise ctx.error(
                ErrorTemplate.plural_case_unexpected_token(head.kind, ctx.span_at(head))
            )

    start = ctx.tokens.next()
    if start is None or start.kind is not TokenKind.PLURAL_START:
        raise ctx.error(_head_error(ctx, start))

    body = _parse_plural_body(ctx, start)
    if match_kind is None:
        return _DefaultCase(body)
    return PluralCase(match_kind, low, high, body)


def _parse_plural_body(ctx: ParseContext, start: Token) -> tuple[PluralBodyElement, ...]:
    body: list[PluralBodyElement] = []
    while (token := ctx.tokens.next()) is not None:
        match token.kind:
            case TokenKind.LITERAL:
                body.append(Literal(token.text))
            case TokenKind.PLURAL_COUNT:
                body.append(PluralCount())
            case TokenKind.PLURAL_END:
                return tuple(body)
            case _:
                raise ctx.error(
                    ErrorTemplate.plural_case_unexpected_token(token.kind, ctx.span_at(token))
                )
    raise ctx.error(ErrorTemplate.plural_case_unterminated(ctx.span_at(start)))


def _head_error(ctx: ParseContext, token: Token | None) -> Diagnostic:
    """Diagnostic for a token found where a case head should continue."""
    if token is None or token.kind in _CASE_HEAD_KINDS or token.kind is TokenKind.PLURAL_RANGE:
        kind = token.kind if token is not None else None
        return ErrorTemplate.plural_translation_start_expected(kind, ctx.span_at(token))
    return ErrorTemplate.plural_case_unexpected_token(token.kind, ctx.span_at(token))


def _parse_int(ctx: ParseContext, token: Token) -> int:
    try:
        return int(token.text, 10)
    except ValueError:
        # Non-digit text from a hand-built stream, or beyond the int
        # conversion digit limit
        raise ctx.error(
            ErrorTemplate.plural_value_invalid(token.text, ctx.span_at(token))
        ) from None
