"""Replacement value formatting.

Renders arbitrary Python values as the strings the renderer substitutes.
Formatting is fixed and locale independent:

    str               -> unchanged
    bool              -> "true" / "false"
    int               -> decimal
    float, Decimal    -> two decimals ("3.14")
    None              -> ""
    list/tuple/set    -> items formatted recursively, joined with ", "
    Mapping           -> "key: value" pairs joined with ", "
    anything else     -> str(value)

Sets are formatted in sorted order of their formatted items so output
is stable across runs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from decimal import Decimal

from linguaengine.constants import FLOAT_FORMAT, SEQUENCE_SEPARATOR

__all__ = [
    "ReplacementValue",
    "format_replacement",
    "format_replacements",
]

# Values accepted as replacements. Other types fall back to str().
type ReplacementValue = (
    str
    | int
    | float
    | Decimal
    | bool
    | None
    | list[ReplacementValue]
    | tuple[ReplacementValue, ...]
    | Set[ReplacementValue]
    | Mapping[str, ReplacementValue]
)


def format_replacement(value: object) -> str:
    """Format one replacement value.

    Args:
        value: Any Python value

    Returns:
        String substituted for the placeholder

    Example:
        >>> format_replacement(3.14159)
        '3.14'
        >>> format_replacement([1, True, "x"])
        '1, true, x'
        >>> format_replacement({"a": 1})
        'a: 1'
    """
    match value:
        case str():
            return value
        case bool():
            # bool before int: True is an int
            return "true" if value else "false"
        case int():
            return str(value)
        case float() | Decimal():
            return format(value, FLOAT_FORMAT)
        case None:
            return ""
        case Mapping():
            return SEQUENCE_SEPARATOR.join(
                f"{format_replacement(key)}: {format_replacement(item)}"
                for key, item in value.items()
            )
        case list() | tuple():
            return SEQUENCE_SEPARATOR.join(format_replacement(item) for item in value)
        case Set():
            return SEQUENCE_SEPARATOR.join(sorted(format_replacement(item) for item in value))
        case _:
            return str(value)


def format_replacements(replacements: Mapping[str, object] | None) -> dict[str, str]:
    """Format every value of a replacement mapping.

    Args:
        replacements: Mapping of replacement keys to values (None -> empty)

    Returns:
        New dict with string values; the input is not modified
    """
    if not replacements:
        return {}
    return {key: format_replacement(value) for key, value in replacements.items()}
