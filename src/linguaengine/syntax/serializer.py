"""Serialize a Message back to template source.

Useful for:
- Exporting parsed containers back to translation files
- Property-based testing (roundtrip: parse -> serialize -> parse)

Top-level literal colons are written as '\\:' so they cannot start a
placeholder. Plural case bodies have no escape syntax and are written
verbatim; whitespace inside plural argument lists is normalized to single
spaces.

Python 3.13+.
"""

from typing import assert_never

from linguaengine.constants import (
    ESCAPE_CHAR,
    PLACEHOLDER_PREFIX,
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
from linguaengine.enums import MatchKind, TransformerName

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

__all__ = ["SerializationValidationError", "TemplateSerializer", "serialize"]

_ESCAPED_COLON = ESCAPE_CHAR + PLACEHOLDER_PREFIX


class SerializationValidationError(ValueError):
    """Raised when a Message cannot be written as an equivalent template.

    Only raised with validate=True. Common causes (all from programmatic
    construction; parsed messages always serialize):
    - Replacement key that is not a run of lowercase ASCII letters
    - Literal after a replacement that would extend its key or chain
    - Literal ending in a backslash right before a replacement
    - Plural body text containing '}' or '#'
    """


def _is_key(text: str) -> bool:
    return bool(text) and all("a" <= char <= "z" for char in text)


def _validate_body(body: tuple[PluralBodyElement, ...], context: str) -> None:
    for element in body:
        if Literal.guard(element) and (
            PLURAL_BODY_CLOSE in element.value or PLURAL_COUNT_MARKER in element.value
        ):
            msg = f"Plural body in {context} contains '}}' or '#': {element.value!r}"
            raise SerializationValidationError(msg)


def _validate_transformer(transformer: Transformer, context: str) -> None:
    if not Plural.guard(transformer):
        return
    for case in transformer.cases:
        if case.low < 0 or case.high < 0:
            msg = f"Plural case in {context} has a negative bound ({case.low}, {case.high})"
            raise SerializationValidationError(msg)
        _validate_body(case.body, context)
    _validate_body(transformer.other, context)


def _extends_placeholder(replacement: Replacement, literal: Literal) -> bool:
    first = literal.value[:1]
    if not first:
        return False
    if first == TRANSFORMER_SEPARATOR:
        return True
    # ')' closes a plural chain, so only '|' can continue it
    if replacement.transformers and Plural.guard(replacement.transformers[-1]):
        return False
    return "a" <= first <= "z"


def _validate_message(message: Message) -> None:
    """Check that serializing message yields an equivalent template.

    Raises:
        SerializationValidationError: If validation fails
    """
    previous: Operation | None = None
    for op in message.operations:
        match op:
            case Replacement():
                context = f"replacement ':{op.key}'"
                if not _is_key(op.key):
                    msg = f"Invalid replacement key {op.key!r} (expected lowercase ASCII letters)"
                    raise SerializationValidationError(msg)
                if Literal.guard(previous) and previous.value.endswith(ESCAPE_CHAR):
                    msg = f"Literal before {context} ends with a backslash"
                    raise SerializationValidationError(msg)
                for transformer in op.transformers:
                    _validate_transformer(transformer, context)
            case Literal():
                if Replacement.guard(previous) and _extends_placeholder(previous, op):
                    msg = (
                        f"Literal {op.value!r} after replacement ':{previous.key}' "
                        "would be read as part of the placeholder"
                    )
                    raise SerializationValidationError(msg)
        previous = op


class TemplateSerializer:
    """Converts a Message back to template source.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.
    """

    def serialize(self, message: Message, *, validate: bool = False) -> str:
        """Serialize message to template source.

        Args:
            message: Parsed or constructed Message
            validate: If True, check the message can round-trip first

        Returns:
            Template source

        Raises:
            SerializationValidationError: If validate=True and message is invalid
        """
        if validate:
            _validate_message(message)

        output: list[str] = []
        for op in message.operations:
            self._serialize_operation(op, output)
        return "".join(output)

    def _serialize_operation(self, op: Operation, output: list[str]) -> None:
        match op:
            case Literal():
                output.append(op.value.replace(PLACEHOLDER_PREFIX, _ESCAPED_COLON))
            case Replacement():
                output.append(PLACEHOLDER_PREFIX + op.key)
                for transformer in op.transformers:
                    output.append(TRANSFORMER_SEPARATOR)
                    self._serialize_transformer(transformer, output)
            case _ as unreachable:
                assert_never(unreachable)

    def _serialize_transformer(self, transformer: Transformer, output: list[str]) -> None:
        match transformer:
            case Capitalize():
                output.append(TransformerName.CAPITALIZE)
            case Replace():
                output.append(TransformerName.REPLACE)
            case Plural():
                self._serialize_plural(transformer, output)
            case _ as unreachable:
                assert_never(unreachable)

    def _serialize_plural(self, plural: Plural, output: list[str]) -> None:
        arguments = [self._serialize_case(case) for case in plural.cases]
        arguments.append(PLURAL_OTHER_KEYWORD + " " + self._serialize_body(plural.other))
        output.append(TransformerName.PLURAL)
        output.append(PLURAL_ARGS_OPEN)
        output.append(" ".join(arguments))
        output.append(PLURAL_ARGS_CLOSE)

    def _serialize_case(self, case: PluralCase) -> str:
        head = f"{PLURAL_EXACT_PREFIX}{case.low}"
        if case.match is MatchKind.RANGE:
            head += f"{PLURAL_RANGE_SEPARATOR}{case.high}"
        return head + " " + self._serialize_body(case.body)

    @staticmethod
    def _serialize_body(body: tuple[PluralBodyElement, ...]) -> str:
        parts = [PLURAL_BODY_OPEN]
        for element in body:
            match element:
                case Literal():
                    parts.append(element.value)
                case PluralCount():
                    parts.append(PLURAL_COUNT_MARKER)
                case _ as unreachable:
                    assert_never(unreachable)
        parts.append(PLURAL_BODY_CLOSE)
        return "".join(parts)


def serialize(message: Message, *, validate: bool = False) -> str:
    """Serialize Message to template source.

    Convenience function for TemplateSerializer.serialize().

    Args:
        message: Message to serialize
        validate: If True, check the message can round-trip first

    Returns:
        Template source

    Raises:
        SerializationValidationError: If validate=True and message is invalid

    Example:
        >>> from linguaengine.syntax import parse, serialize
        >>> serialize(parse("Time\\\\: :n|plural(=1-2 {few} other {# items})"))
        'Time\\\\: :n|plural(=1-2 {few} other {# items})'
    """
    serializer = TemplateSerializer()
    return serializer.serialize(message, validate=validate)
