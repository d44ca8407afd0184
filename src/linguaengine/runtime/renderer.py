"""Message renderer - converts a parsed Message to a string.

Walks operations in order, substituting replacement values and applying
transformers left to right. Rendering never fails; anomalies degrade to a
defined fallback:

    missing replacement key  -> ":key" left in the output
    non-integer plural count -> count 0
    no plural case matches   -> 'other' body
    unknown 'replace' key    -> value unchanged

Thread Safety:
    Messages are immutable and the renderer keeps no per-call state on the
    instance, so one renderer may be shared across threads.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping
from typing import assert_never

from linguaengine.constants import PLACEHOLDER_PREFIX
from linguaengine.syntax import (
    Capitalize,
    Literal,
    Message,
    Plural,
    PluralBodyElement,
    PluralCount,
    Replace,
    Replacement,
    Transformer,
)

__all__ = [
    "MessageRenderer",
    "capitalize",
    "estimate_length",
    "parse_count",
    "render",
]

# Optional sign then ASCII digits; int() alone would also accept '_' separators
# and non-ASCII digits.
_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

_EMPTY_SIBLINGS: Mapping[str, Message] = {}


def capitalize(value: str) -> str:
    """Uppercase the first character, leave the rest untouched.

    Characters whose uppercase form is several characters ('ß', 'ŉ')
    are kept as they are.

    Example:
        >>> capitalize("élan vital")
        'Élan vital'
        >>> capitalize("ßx")
        'ßx'
        >>> capitalize("")
        ''
    """
    first = value[:1]
    upper = first.upper()
    if len(upper) != 1:
        return value
    return upper + value[1:]


def parse_count(value: str) -> int:
    """Parse a plural count as a base-10 integer, defaulting to 0.

    Example:
        >>> parse_count(" 12 "), parse_count("-3"), parse_count("2.5")
        (12, -3, 0)
    """
    text = value.strip()
    if _COUNT_PATTERN.fullmatch(text) is None:
        return 0
    try:
        return int(text, 10)
    except ValueError:
        # Beyond the int conversion digit limit
        return 0


def _placeholder(key: str) -> str:
    return PLACEHOLDER_PREFIX + key


def _literal_text(message: Message) -> str:
    """Concatenate the literal content of message.

    Replacements appear as ':key'; their transformers are not evaluated.
    """
    parts: list[str] = []
    for op in message.operations:
        match op:
            case Literal():
                parts.append(op.value)
            case Replacement():
                parts.append(_placeholder(op.key))
            case _ as unreachable:
                assert_never(unreachable)
    return "".join(parts)


def _render_body(body: tuple[PluralBodyElement, ...], count: int) -> str:
    parts: list[str] = []
    for element in body:
        match element:
            case Literal():
                parts.append(element.value)
            case PluralCount():
                parts.append(str(count))
            case _ as unreachable:
                assert_never(unreachable)
    return "".join(parts)


class MessageRenderer:
    """Renders messages against replacement values.

    Attributes:
        siblings: Messages of the same language, used by the replace transformer
    """

    __slots__ = ("siblings",)

    def __init__(self, siblings: Mapping[str, Message] | None = None) -> None:
        """Initialize renderer.

        Args:
            siblings: Messages reachable through 'replace' (default: none)
        """
        self.siblings: Mapping[str, Message] = (
            siblings if siblings is not None else _EMPTY_SIBLINGS
        )

    def render(self, message: Message, replacements: Mapping[str, str] | None = None) -> str:
        """Render message.

        Args:
            message: Parsed message
            replacements: Replacement values, already formatted as strings

        Returns:
            Rendered string (never raises for missing or malformed values)
        """
        values: Mapping[str, str] = replacements if replacements is not None else {}
        output: list[str] = []
        for op in message.operations:
            match op:
                case Literal():
                    output.append(op.value)
                case Replacement():
                    output.append(self._render_replacement(op, values))
                case _ as unreachable:
                    assert_never(unreachable)
        return "".join(output)

    def _render_replacement(self, op: Replacement, values: Mapping[str, str]) -> str:
        if op.key not in values:
            return _placeholder(op.key)
        value = values[op.key]
        for transformer in op.transformers:
            value = self.apply(transformer, value)
        return value

    def apply(self, transformer: Transformer, value: str) -> str:
        """Apply one transformer to value."""
        match transformer:
            case Capitalize():
                return capitalize(value)
            case Replace():
                sibling = self.siblings.get(value)
                if sibling is None:
                    return value
                return _literal_text(sibling)
            case Plural():
                count = parse_count(value)
                return _render_body(transformer.select(count), count)
            case _ as unreachable:
                assert_never(unreachable)


def estimate_length(message: Message, replacements: Mapping[str, str] | None = None) -> int:
    """Estimate the rendered length of message.

    Sum of literal lengths plus, per replacement, the value length or the
    placeholder length when the value is missing. Transformers are not
    evaluated, so this is a sizing hint only.
    """
    values: Mapping[str, str] = replacements if replacements is not None else {}
    total = 0
    for op in message.operations:
        match op:
            case Literal():
                total += len(op.value)
            case Replacement():
                if op.key in values:
                    total += len(values[op.key])
                else:
                    total += len(op.key) + len(PLACEHOLDER_PREFIX)
            case _ as unreachable:
                assert_never(unreachable)
    return total


def render(
    message: Message,
    replacements: Mapping[str, str] | None = None,
    siblings: Mapping[str, Message] | None = None,
) -> str:
    """Render message with replacements.

    Convenience function for MessageRenderer.render().

    Example:
        >>> from linguaengine.syntax import parse
        >>> template = parse("I have :count|plural(=0 {No apples} =1-2 {Apple} other {# apples})")
        >>> render(template, {"count": "9"})
        'I have 9 apples'
        >>> render(parse("Hi :name"), {})
        'Hi :name'
    """
    return MessageRenderer(siblings).render(message, replacements)
