"""Enumerations for linguaengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of lexer token.

    StrEnum provides automatic string conversion: str(TokenKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    """Verbatim text, outside placeholders or inside a plural case body"""

    REPLACEMENT = "replacement"
    """Placeholder key: :name"""

    TRANSFORMER = "transformer"
    """Transformer name after a pipe: |capitalize"""

    PLURAL_NUMERIC = "plural_numeric"
    """Digits of an exact value or range bound: =1-2"""

    PLURAL_RANGE = "plural_range"
    """Dash between two range bounds"""

    PLURAL_OTHER = "plural_other"
    """The 'other' keyword opening the default case"""

    PLURAL_START = "plural_start"
    """Opening brace of a plural case body"""

    PLURAL_END = "plural_end"
    """Closing brace of a plural case body"""

    PLURAL_COUNT = "plural_count"
    """Count marker (#) inside a plural case body"""

    ERROR = "error"
    """Terminal lexer error carrying a message"""


class TransformerName(StrEnum):
    """Name of a value transformer as written after a pipe.

    StrEnum provides automatic string conversion: str(TransformerName.PLURAL) == "plural"
    """

    CAPITALIZE = "capitalize"
    """Uppercase the first character: :name|capitalize"""

    REPLACE = "replace"
    """Use the value as a key into sibling messages: :field|replace"""

    PLURAL = "plural"
    """Select a case by count: :n|plural(=1 {one} other {#})"""


class MatchKind(StrEnum):
    """How a plural case is compared against the count.

    StrEnum provides automatic string conversion: str(MatchKind.EXACT) == "exact"
    """

    EXACT = "exact"
    """Case matches a single value: =1 {...}"""

    RANGE = "range"
    """Case matches an inclusive range: =2-4 {...}"""


class MergeStrategy(StrEnum):
    """Policy used when merging two translation containers.

    StrEnum provides automatic string conversion: str(MergeStrategy.SKIP) == "skip"
    """

    SKIP_AND_CLEAN = "skip_and_clean"
    """Keep existing target messages, drop target keys missing from the source"""

    SKIP = "skip"
    """Keep existing target messages, only add new ones"""

    OVERWRITE = "overwrite"
    """Replace target messages with source messages"""

    OVERWRITE_AND_CLEAN = "overwrite_and_clean"
    """Replace target messages and drop target keys missing from the source"""


__all__ = [
    "MatchKind",
    "MergeStrategy",
    "TokenKind",
    "TransformerName",
]
