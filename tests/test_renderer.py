"""Tests for the message renderer and transformers.

Rendering never raises: missing values, malformed counts and unknown
'replace' keys all degrade to defined output.
"""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linguaengine.runtime import (
    MessageRenderer,
    capitalize,
    estimate_length,
    parse_count,
    render,
)
from linguaengine.syntax import Capitalize, Literal, Message, Plural, PluralCount, Replace, parse

from tests.strategies import replacement_mappings, templates

APPLES = parse("I have :count|plural(=0 {No apples} =1-2 {Apple} other {# apples})")


# ============================================================================
# BASIC RENDERING
# ============================================================================


class TestRenderBasic:
    """Test literal and replacement output."""

    def test_plain_text(self) -> None:
        """Literals are copied verbatim."""
        assert render(parse("Hello, World!")) == "Hello, World!"

    def test_empty_message(self) -> None:
        """An empty message renders to an empty string."""
        assert render(Message(())) == ""

    def test_replacement(self) -> None:
        """Values are substituted for placeholders."""
        assert render(parse("Hi :name!"), {"name": "Ada"}) == "Hi Ada!"

    def test_missing_value_keeps_placeholder(self) -> None:
        """A missing value leaves ':key' in the output."""
        assert render(parse("Hi :name"), {}) == "Hi :name"
        assert render(parse("Hi :name|capitalize")) == "Hi :name"

    def test_colon_without_key_is_preserved(self) -> None:
        """Literal colons render unchanged."""
        assert render(parse("Time: 10")) == "Time: 10"

    def test_duplicate_keys(self) -> None:
        """Each occurrence of a key is rendered independently."""
        assert render(parse(":a and :a|capitalize"), {"a": "x"}) == "x and X"

    def test_replacements_not_mutated(self) -> None:
        """Rendering does not modify the replacement mapping."""
        values = {"name": "ada"}
        render(parse(":name|capitalize"), values)
        assert values == {"name": "ada"}


# ============================================================================
# CAPITALIZE
# ============================================================================


class TestCapitalize:
    """Test the capitalize transformer."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("a", "A"),
            ("hello world", "Hello world"),
            ("hELLO", "HELLO"),
            ("élan", "Élan"),
            ("1st", "1st"),
            ("ßx", "ßx"),
            ("ŉa", "ŉa"),
            ("ﬁne", "ﬁne"),
        ],
    )
    def test_capitalize(self, value: str, expected: str) -> None:
        """Only the first character is uppercased."""
        assert capitalize(value) == expected

    @given(st.text(alphabet=string.ascii_letters + string.digits + " .,-", max_size=20))
    def test_capitalize_is_idempotent(self, value: str) -> None:
        """Capitalizing twice equals capitalizing once."""
        assert capitalize(capitalize(value)) == capitalize(value)

    @given(st.text(max_size=5))
    def test_capitalize_changes_at_most_first_character(self, value: str) -> None:
        """Length is preserved and only the first character may change."""
        result = capitalize(value)

        assert len(result) == len(value)
        assert result[1:] == value[1:]

    def test_capitalize_in_template(self) -> None:
        """The transformer is applied to the substituted value."""
        assert render(parse("Hi :name|capitalize"), {"name": "ada"}) == "Hi Ada"


# ============================================================================
# REPLACE
# ============================================================================


class TestReplace:
    """Test the replace transformer."""

    def test_replace_then_capitalize(self) -> None:
        """The value selects a sibling message whose text is then capitalized."""
        siblings = {"field": parse("email")}
        message = parse(":field|replace|capitalize is required")

        assert render(message, {"field": "field"}, siblings) == "Email is required"

    def test_capitalize_before_lookup(self) -> None:
        """Transformers run left to right, so capitalize changes the lookup key."""
        siblings = {"field": parse("email"), "Field": parse("E-mail address")}
        message = parse(":x|capitalize|replace")

        assert render(message, {"x": "field"}, siblings) == "E-mail address"

    def test_unknown_sibling_keeps_value(self) -> None:
        """An unmatched lookup leaves the value unchanged."""
        assert render(parse(":x|replace"), {"x": "nothing"}, {}) == "nothing"

    def test_sibling_placeholders_are_not_rendered(self) -> None:
        """The sibling's literal text is used; its placeholders stay as ':key'."""
        siblings = {"greeting": parse("Hi :name|capitalize")}

        assert render(parse(":x|replace"), {"x": "greeting", "name": "ada"}, siblings) == (
            "Hi :name"
        )

    def test_renderer_without_siblings(self) -> None:
        """A renderer without siblings treats every lookup as unmatched."""
        renderer = MessageRenderer()
        assert renderer.apply(Replace(), "field") == "field"


# ============================================================================
# PLURAL
# ============================================================================


class TestPlural:
    """Test the plural transformer."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            ("0", "I have No apples"),
            ("1", "I have Apple"),
            ("2", "I have Apple"),
            ("3", "I have 3 apples"),
            ("9", "I have 9 apples"),
        ],
    )
    def test_apples(self, count: str, expected: str) -> None:
        """Exact, range and other cases select the right body."""
        assert render(APPLES, {"count": count}) == expected

    def test_first_matching_case_wins(self) -> None:
        """Overlapping cases resolve to the first written."""
        message = parse(":n|plural(=1-5 {few} =3 {three} other {many})")
        assert render(message, {"n": "3"}) == "few"

    def test_non_integer_count_is_zero(self) -> None:
        """Counts that are not integers select as 0."""
        message = parse(":n|plural(=0 {zero #} other {#})")

        assert render(message, {"n": "2.5"}) == "zero 0"
        assert render(message, {"n": "many"}) == "zero 0"

    def test_count_whitespace_and_sign(self) -> None:
        """Counts are trimmed and may carry a sign."""
        message = parse(":n|plural(other {# items})")

        assert render(message, {"n": " 12 "}) == "12 items"
        assert render(message, {"n": "-3"}) == "-3 items"
        assert render(message, {"n": "+4"}) == "4 items"

    def test_plural_then_capitalize(self) -> None:
        """Transformers after plural receive the selected body."""
        message = parse(":n|plural(=1 {one item} other {# items})|capitalize")
        assert render(message, {"n": "1"}) == "One item"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12", 12),
            (" 7\n", 7),
            ("-3", -3),
            ("+4", 4),
            ("2.5", 0),
            ("", 0),
            ("1_000", 0),
            ("٣", 0),
        ],
    )
    def test_parse_count(self, text: str, expected: int) -> None:
        """Only optionally signed ASCII integers are counts."""
        assert parse_count(text) == expected

    @given(st.integers(min_value=-100, max_value=100))
    def test_other_iff_no_case_matches(self, count: int) -> None:
        """The other body is used exactly when no guarded case matches."""
        message = parse(":n|plural(=0 {zero} =2-4 {few} other {other})")
        rendered = render(message, {"n": str(count)})
        expected_other = count != 0 and not 2 <= count <= 4

        assert (rendered == "other") is expected_other

    @given(st.integers(min_value=-100, max_value=100))
    def test_plural_without_cases_always_selects_other(self, count: int) -> None:
        """A plural with only an other body selects it for every count."""
        plural = Plural((), (Literal("other"),))
        assert plural.select(count) == (Literal("other"),)

    def test_count_marker(self) -> None:
        """'#' is replaced by the parsed count."""
        renderer = MessageRenderer()
        plural = Plural((), (PluralCount(), Literal("!")))

        assert renderer.apply(plural, "007") == "7!"
        assert renderer.apply(Capitalize(), "x") == "X"


# ============================================================================
# LENGTH ESTIMATE AND PROPERTIES
# ============================================================================


class TestRenderProperties:
    """Test estimate_length and general render properties."""

    def test_estimate_length(self) -> None:
        """Literal lengths plus value or placeholder lengths."""
        message = parse("Hi :name and :other")

        assert estimate_length(message, {"name": "Ada"}) == len("Hi Ada and :other")

    @given(templates(), replacement_mappings())
    def test_render_never_raises(self, source: str, values: dict[str, str]) -> None:
        """Rendering any parsed template with any values returns a string."""
        assert isinstance(render(parse(source), values), str)

    @given(templates(), replacement_mappings())
    def test_render_is_deterministic(self, source: str, values: dict[str, str]) -> None:
        """Rendering twice gives the same output."""
        message = parse(source)
        assert render(message, values) == render(message, values)
