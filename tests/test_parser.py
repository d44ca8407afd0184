"""Tests for the recursive-descent template parser.

Covers the operation tree built from valid templates, plural case
structure, and parser-level errors. Errors that the lexer cannot produce
from text are exercised with hand-built token streams via parse_tokens().
"""

from __future__ import annotations

import pytest
from hypothesis import given

from linguaengine.diagnostics import (
    DiagnosticCode,
    LinguaLexError,
    LinguaParseError,
    LinguaSyntaxError,
)
from linguaengine.enums import MatchKind, TokenKind
from linguaengine.syntax import (
    Capitalize,
    Literal,
    Message,
    Plural,
    PluralCase,
    PluralCount,
    Replace,
    Replacement,
    TemplateParser,
    Token,
    parse,
)

from tests.strategies import plain_text

APPLES = "I have :count|plural(=0 {No apples} =1-2 {Apple} other {# apples})"


def parse_error_code(tokens: list[Token]) -> DiagnosticCode:
    with pytest.raises(LinguaParseError) as exc_info:
        TemplateParser().parse_tokens(tokens)
    assert exc_info.value.diagnostic is not None
    return exc_info.value.diagnostic.code


# ============================================================================
# BASIC STRUCTURE
# ============================================================================


class TestParserBasic:
    """Test literals and replacements."""

    def test_empty_template(self) -> None:
        """Empty input parses to a message without operations."""
        assert parse("") == Message(())

    def test_plain_text(self) -> None:
        """Text without placeholders is one literal."""
        message = parse("Hello, World!")

        assert message.operations == (Literal("Hello, World!"),)
        assert message.is_plain

    @given(plain_text())
    def test_text_without_colon_is_one_literal(self, text: str) -> None:
        """Any text without ':' parses to exactly one literal equal to it."""
        operations = parse(text).operations
        if text:
            assert operations == (Literal(text),)
        else:
            assert operations == ()

    def test_replacement_with_surrounding_text(self) -> None:
        """Placeholders split the template into operations."""
        message = parse("Hi :name!")

        assert message.operations == (Literal("Hi "), Replacement("name"), Literal("!"))
        assert not message.is_plain

    def test_transformer_chain_order(self) -> None:
        """Transformers are kept in written order."""
        message = parse(":field|replace|capitalize is required")

        assert message.operations[0] == Replacement("field", (Replace(), Capitalize()))

    def test_duplicate_keys_are_independent(self) -> None:
        """A key may appear more than once."""
        message = parse(":a and :a|capitalize")

        assert message.operations == (
            Replacement("a"),
            Literal(" and "),
            Replacement("a", (Capitalize(),)),
        )

    def test_colon_without_key_is_preserved(self) -> None:
        """':' followed by a non-letter is literal text."""
        assert parse("a: b").operations == (Literal("a: b"),)
        assert parse("Time: 10").operations == (Literal("Time: 10"),)

    def test_escaped_colon(self) -> None:
        """'\\:' yields a literal colon, never a placeholder."""
        assert parse("\\:name").operations == (Literal(":name"),)

    def test_node_type_guards(self) -> None:
        """Type guards identify parsed nodes."""
        literal, replacement = parse("Hi :n|plural(other {#})").operations

        assert Literal.guard(literal)
        assert not Literal.guard(replacement)
        assert Replacement.guard(replacement)
        assert Plural.guard(replacement.transformers[0])
        assert not Plural.guard(Capitalize())


# ============================================================================
# PLURAL
# ============================================================================


class TestParserPlural:
    """Test plural transformer structure."""

    def test_apples_example(self) -> None:
        """Exact, range and other cases are parsed into a Plural."""
        message = parse(APPLES)

        assert message.operations[0] == Literal("I have ")
        replacement = message.operations[1]
        assert isinstance(replacement, Replacement)
        assert replacement.key == "count"

        plural = replacement.transformers[0]
        assert isinstance(plural, Plural)
        assert plural.cases == (
            PluralCase.exact(0, (Literal("No apples"),)),
            PluralCase.range(1, 2, (Literal("Apple"),)),
        )
        assert plural.other == (PluralCount(), Literal(" apples"))

    def test_case_kinds(self) -> None:
        """EXACT cases have low == high."""
        plural = parse(":n|plural(=3 {three} other {x})").operations[0]
        assert isinstance(plural, Replacement)
        case = plural.transformers[0]
        assert isinstance(case, Plural)
        assert case.cases[0].match is MatchKind.EXACT
        assert case.cases[0].low == case.cases[0].high == 3

    def test_reversed_range_is_kept(self) -> None:
        """The parser does not validate range order."""
        replacement = parse(":n|plural(=5-1 {x} other {y})").operations[0]
        assert isinstance(replacement, Replacement)
        plural = replacement.transformers[0]
        assert isinstance(plural, Plural)
        assert plural.cases[0] == PluralCase.range(5, 1, (Literal("x"),))

    def test_later_other_wins(self) -> None:
        """A second 'other' case replaces the first."""
        replacement = parse(":n|plural(other {a} other {b})").operations[0]
        assert isinstance(replacement, Replacement)
        plural = replacement.transformers[0]
        assert isinstance(plural, Plural)
        assert plural.other == (Literal("b"),)

    def test_empty_case_body_is_allowed(self) -> None:
        """Only 'other' must be non-empty."""
        replacement = parse(":n|plural(=0 {} other {#})").operations[0]
        assert isinstance(replacement, Replacement)
        plural = replacement.transformers[0]
        assert isinstance(plural, Plural)
        assert plural.cases[0].body == ()

    def test_transformers_after_plural(self) -> None:
        """The chain continues after the plural arguments."""
        replacement = parse(":n|plural(other {x})|capitalize").operations[0]
        assert isinstance(replacement, Replacement)
        assert isinstance(replacement.transformers[0], Plural)
        assert replacement.transformers[1] == Capitalize()

    @pytest.mark.parametrize(
        "source",
        [
            ":n|plural(=1 {one})",
            ":n|plural(other {})",
            ":n|plural()",
        ],
    )
    def test_missing_other_fails(self, source: str) -> None:
        """A plural without a non-empty 'other' case is rejected."""
        with pytest.raises(LinguaParseError) as exc_info:
            parse(source)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PLURAL_OTHER_MISSING

    def test_plural_model_requires_other(self) -> None:
        """Constructing a Plural with an empty other body raises."""
        with pytest.raises(ValueError, match="other"):
            Plural((), ())


# ============================================================================
# PARSER ERRORS
# ============================================================================


class TestParserErrors:
    """Test errors raised for malformed token streams."""

    def test_unexpected_top_level_token(self) -> None:
        """Plural tokens cannot appear outside a plural transformer."""
        code = parse_error_code([Token(TokenKind.PLURAL_END, "}")])
        assert code is DiagnosticCode.UNEXPECTED_TOKEN

    def test_unterminated_case(self) -> None:
        """A case body without PLURAL_END is unterminated."""
        code = parse_error_code(
            [
                Token(TokenKind.REPLACEMENT, "n"),
                Token(TokenKind.TRANSFORMER, "plural"),
                Token(TokenKind.PLURAL_NUMERIC, "1"),
                Token(TokenKind.PLURAL_START, "{"),
                Token(TokenKind.LITERAL, "one"),
            ]
        )
        assert code is DiagnosticCode.PLURAL_CASE_UNTERMINATED

    def test_case_head_without_body(self) -> None:
        """A case head must be followed by a body start."""
        code = parse_error_code(
            [
                Token(TokenKind.REPLACEMENT, "n"),
                Token(TokenKind.TRANSFORMER, "plural"),
                Token(TokenKind.PLURAL_NUMERIC, "1"),
                Token(TokenKind.PLURAL_NUMERIC, "2"),
            ]
        )
        assert code is DiagnosticCode.PLURAL_TRANSLATION_START_EXPECTED

    def test_case_head_at_end_of_input(self) -> None:
        """Input ending after a case head reports the missing body."""
        code = parse_error_code(
            [
                Token(TokenKind.REPLACEMENT, "n"),
                Token(TokenKind.TRANSFORMER, "plural"),
                Token(TokenKind.PLURAL_OTHER, "other"),
            ]
        )
        assert code is DiagnosticCode.PLURAL_TRANSLATION_START_EXPECTED

    def test_unexpected_token_in_body(self) -> None:
        """Only literals and count markers may appear in a body."""
        code = parse_error_code(
            [
                Token(TokenKind.REPLACEMENT, "n"),
                Token(TokenKind.TRANSFORMER, "plural"),
                Token(TokenKind.PLURAL_OTHER, "other"),
                Token(TokenKind.PLURAL_START, "{"),
                Token(TokenKind.REPLACEMENT, "x"),
            ]
        )
        assert code is DiagnosticCode.PLURAL_CASE_UNEXPECTED_TOKEN

    def test_invalid_case_value(self) -> None:
        """Non-numeric case values are rejected."""
        code = parse_error_code(
            [
                Token(TokenKind.REPLACEMENT, "n"),
                Token(TokenKind.TRANSFORMER, "plural"),
                Token(TokenKind.PLURAL_NUMERIC, "x"),
            ]
        )
        assert code is DiagnosticCode.PLURAL_VALUE_INVALID

    def test_unknown_transformer_token(self) -> None:
        """Transformer tokens with unknown names are rejected."""
        code = parse_error_code(
            [Token(TokenKind.REPLACEMENT, "n"), Token(TokenKind.TRANSFORMER, "upper")]
        )
        assert code is DiagnosticCode.TRANSFORMER_UNKNOWN

    def test_lex_errors_propagate(self) -> None:
        """Character-level errors surface as LinguaLexError."""
        with pytest.raises(LinguaLexError):
            parse(":name|upper")

    def test_error_hierarchy(self) -> None:
        """Lex and parse errors share LinguaSyntaxError."""
        assert issubclass(LinguaLexError, LinguaSyntaxError)
        assert issubclass(LinguaParseError, LinguaSyntaxError)

    def test_error_position_and_context(self) -> None:
        """Errors carry offset, line and column of the offending token."""
        source = "first line\n:n|plural(=1 {one})"
        with pytest.raises(LinguaParseError) as exc_info:
            parse(source)

        error = exc_info.value
        assert error.position == 12
        context = error.format_with_context().split("\n")
        assert context[0].startswith("2:2: ")
        assert context[2] == "   2 | :n|plural(=1 {one})"
        assert context[3] == " " * 8 + "^"


# ============================================================================
# CONFIGURATION
# ============================================================================


class TestParserConfiguration:
    """Test TemplateParser options."""

    def test_size_limit(self) -> None:
        """Templates above max_source_size are rejected before lexing."""
        parser = TemplateParser(max_source_size=5)

        with pytest.raises(ValueError, match="exceeds maximum"):
            parser.parse("123456")
        assert parser.parse("12345") == Message((Literal("12345"),))

    def test_zero_disables_limit(self) -> None:
        """max_source_size=0 disables the check."""
        parser = TemplateParser(max_source_size=0)

        assert parser.max_source_size == 0
        assert parser.parse("x" * 100).operations == (Literal("x" * 100),)

    def test_repr(self) -> None:
        """repr shows the configured limit."""
        assert repr(TemplateParser(max_source_size=10)) == "TemplateParser(max_source_size=10)"
