"""Message introspection.

Reports which replacement keys and transformers a parsed message uses,
for validating translations against the values call sites provide.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from linguaengine.enums import TransformerName
from linguaengine.syntax.ast import (
    Capitalize,
    Literal,
    Message,
    Plural,
    Replace,
    Replacement,
    Transformer,
)

__all__ = [
    "MessageIntrospection",
    "extract_replacement_keys",
    "introspect_message",
]


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Introspection result for a message."""

    replacement_keys: frozenset[str]
    """Keys of all placeholders, without the ':' prefix."""

    transformers: frozenset[str]
    """Names of all transformers used."""

    has_plural: bool
    """Whether any placeholder uses the plural transformer."""

    def requires_replacement(self, key: str) -> bool:
        """Check if the message has a placeholder for key."""
        return key in self.replacement_keys


def _transformer_name(transformer: Transformer) -> TransformerName:
    match transformer:
        case Capitalize():
            return TransformerName.CAPITALIZE
        case Replace():
            return TransformerName.REPLACE
        case Plural():
            return TransformerName.PLURAL
        case _ as unreachable:
            assert_never(unreachable)


def introspect_message(message: Message) -> MessageIntrospection:
    """Collect placeholder and transformer usage of message.

    Example:
        >>> from linguaengine.syntax import parse
        >>> info = introspect_message(parse(":n|plural(other {#}) by :name|capitalize"))
        >>> sorted(info.replacement_keys), sorted(info.transformers), info.has_plural
        (['n', 'name'], ['capitalize', 'plural'], True)
    """
    keys: set[str] = set()
    names: set[str] = set()
    for op in message.operations:
        match op:
            case Literal():
                pass
            case Replacement():
                keys.add(op.key)
                names.update(str(_transformer_name(t)) for t in op.transformers)
            case _ as unreachable:
                assert_never(unreachable)

    return MessageIntrospection(
        replacement_keys=frozenset(keys),
        transformers=frozenset(names),
        has_plural=TransformerName.PLURAL in names,
    )


def extract_replacement_keys(message: Message) -> frozenset[str]:
    """Keys of all placeholders in message.

    Simplified API; use introspect_message() for transformer details.
    """
    return introspect_message(message).replacement_keys
