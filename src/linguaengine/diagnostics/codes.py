"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lexer errors (character-level template syntax)
        2000-2999: Parser errors (token-level template structure)
        3000-3999: Loading errors (translation files and containers)
        4000-4999: Language errors (language tag parsing)
    """

    # Lexer errors (1000-1999)
    TRANSFORMER_NAME_EXPECTED = 1001
    TRANSFORMER_UNKNOWN = 1002
    PLURAL_OPEN_PAREN_EXPECTED = 1003
    PLURAL_ARGS_UNEXPECTED_CHAR = 1004
    PLURAL_ARGS_UNEXPECTED_EOF = 1005
    PLURAL_NUMBER_EXPECTED = 1006
    PLURAL_BODY_START_EXPECTED = 1007
    PLURAL_BODY_UNEXPECTED_EOF = 1008

    # Parser errors (2000-2999)
    PLURAL_CASE_UNEXPECTED_TOKEN = 2001
    PLURAL_TRANSLATION_START_EXPECTED = 2002
    PLURAL_CASE_UNTERMINATED = 2003
    PLURAL_OTHER_MISSING = 2004
    PLURAL_VALUE_INVALID = 2005
    UNEXPECTED_TOKEN = 2006

    # Loading errors (3000-3999)
    LOAD_INVALID_YAML = 3001
    LOAD_NOT_A_MAPPING = 3002
    LOAD_DUPLICATE_LANGUAGE = 3003
    LOAD_MATCHER_NO_GROUP = 3004
    LOAD_TEMPLATE_INVALID = 3005
    LOAD_DIRECTORY_UNREADABLE = 3006
    LOAD_VALUE_NOT_SCALAR = 3007

    # Language errors (4000-4999)
    LANGUAGE_INVALID = 4001
    LANGUAGE_UNKNOWN = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools
    (editors, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors without a template position)
        hint: Suggestion for fixing the error
        source_path: Translation file the error belongs to
        message_key: Translation key the error belongs to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    message_key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[TRANSFORMER_UNKNOWN]: Unknown transformer 'upper'
              --> line 1, column 12
              = help: Known transformers are: capitalize, plural, replace

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
