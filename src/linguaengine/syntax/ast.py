"""Message operation tree.

A parsed template is a Message: an ordered tuple of operations. Operations
and transformers are closed unions of frozen dataclasses, so the renderer and
serializer can dispatch with match/case and assert_never.

Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from linguaengine.enums import MatchKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Operations
    "Message",
    "Literal",
    "Replacement",
    # Transformers
    "Capitalize",
    "Replace",
    "Plural",
    "PluralCase",
    "PluralCount",
    # Type aliases
    "Operation",
    "Transformer",
    "PluralBodyElement",
]

# ============================================================================
# OPERATIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text.

    Used both at the top level of a message and inside plural case bodies.
    """

    value: str

    @staticmethod
    def guard(op: object) -> TypeIs["Literal"]:
        """Type guard for Literal."""
        return isinstance(op, Literal)


@dataclass(frozen=True, slots=True)
class PluralCount:
    """Marker substituted with the plural count (written as '#')."""


@dataclass(frozen=True, slots=True)
class Replacement:
    """Named placeholder plus transformers applied left to right.

    Examples:
        :name
        :name|capitalize
        :count|plural(=1 {one} other {#})
    """

    key: str
    transformers: tuple["Transformer", ...] = ()

    @staticmethod
    def guard(op: object) -> TypeIs["Replacement"]:
        """Type guard for Replacement."""
        return isinstance(op, Replacement)


@dataclass(frozen=True, slots=True)
class Message:
    """Parsed translation template.

    Immutable after parsing; safe to render from many threads.
    Duplicate replacement keys are legal and resolved independently.
    """

    operations: tuple["Operation", ...]

    @property
    def is_plain(self) -> bool:
        """True when the message contains no replacements."""
        return all(isinstance(op, Literal) for op in self.operations)


# ============================================================================
# TRANSFORMERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Capitalize:
    """Uppercase the first character of the value."""


@dataclass(frozen=True, slots=True)
class Replace:
    """Use the value as a key into sibling messages of the same language."""


@dataclass(frozen=True, slots=True)
class PluralCase:
    """Guarded plural fragment.

    Attributes:
        match: EXACT (count == low) or RANGE (low <= count <= high)
        low: Exact value or inclusive lower bound
        high: Inclusive upper bound (equals low for EXACT)
        body: Literal text and count markers

    Example:
        =1-2 {Apple}  ->  PluralCase(MatchKind.RANGE, 1, 2, (Literal("Apple"),))
    """

    match: MatchKind
    low: int
    high: int
    body: tuple["PluralBodyElement", ...]

    def matches(self, count: int) -> bool:
        """Check whether this case applies to count."""
        if self.match is MatchKind.EXACT:
            return count == self.low
        return self.low <= count <= self.high

    @staticmethod
    def exact(value: int, body: tuple["PluralBodyElement", ...]) -> "PluralCase":
        """Construct an EXACT case."""
        return PluralCase(MatchKind.EXACT, value, value, body)

    @staticmethod
    def range(low: int, high: int, body: tuple["PluralBodyElement", ...]) -> "PluralCase":
        """Construct a RANGE case."""
        return PluralCase(MatchKind.RANGE, low, high, body)


@dataclass(frozen=True, slots=True)
class Plural:
    """Select a body by count: first matching case, else other.

    Raises:
        ValueError: If other is empty
    """

    cases: tuple[PluralCase, ...]
    other: tuple["PluralBodyElement", ...]

    def __post_init__(self) -> None:
        if not self.other:
            msg = "Plural requires a non-empty 'other' body"
            raise ValueError(msg)

    def select(self, count: int) -> tuple["PluralBodyElement", ...]:
        """Return the body of the first matching case, or other."""
        for case in self.cases:
            if case.matches(count):
                return case.body
        return self.other

    @staticmethod
    def guard(transformer: object) -> TypeIs["Plural"]:
        """Type guard for Plural."""
        return isinstance(transformer, Plural)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Operation = Literal | Replacement
type Transformer = Capitalize | Replace | Plural
type PluralBodyElement = Literal | PluralCount
