"""Shared constants for linguaengine.

Centralized configuration constants used across the syntax, runtime and
localization packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Template syntax: characters with meaning inside translation strings
- Input limits: DoS prevention via size constraints
- Formatting: fixed replacement value formats
- Loading: translation file naming
- Logging: truncation limits for untrusted text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "PLACEHOLDER_PREFIX",
    "ESCAPE_CHAR",
    "TRANSFORMER_SEPARATOR",
    "PLURAL_ARGS_OPEN",
    "PLURAL_ARGS_CLOSE",
    "PLURAL_BODY_OPEN",
    "PLURAL_BODY_CLOSE",
    "PLURAL_COUNT_MARKER",
    "PLURAL_EXACT_PREFIX",
    "PLURAL_RANGE_SEPARATOR",
    "PLURAL_OTHER_KEYWORD",
    "PLURAL_ARG_WHITESPACE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Formatting
    "FLOAT_FORMAT",
    "SEQUENCE_SEPARATOR",
    # Loading
    "DEFAULT_FILE_PATTERN",
    "TRANSLATION_FILE_SUFFIX",
    # Logging
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

PLACEHOLDER_PREFIX: str = ":"
ESCAPE_CHAR: str = "\\"
TRANSFORMER_SEPARATOR: str = "|"
PLURAL_ARGS_OPEN: str = "("
PLURAL_ARGS_CLOSE: str = ")"
PLURAL_BODY_OPEN: str = "{"
PLURAL_BODY_CLOSE: str = "}"
PLURAL_COUNT_MARKER: str = "#"
PLURAL_EXACT_PREFIX: str = "="
PLURAL_RANGE_SEPARATOR: str = "-"
PLURAL_OTHER_KEYWORD: str = "other"

# Whitespace skipped between plural arguments and before a case body.
PLURAL_ARG_WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum template size in characters (1 MB).
# A single translation string above this size is malformed or adversarial.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# FORMATTING
# ============================================================================

# Floats and decimals are always rendered with two decimals, independent of locale.
FLOAT_FORMAT: str = ".2f"

# Separator for sequence and mapping replacement values.
SEQUENCE_SEPARATOR: str = ", "

# ============================================================================
# LOADING
# ============================================================================

# Matches "en.yaml" and "en-US.yaml"; the first group is the language.
DEFAULT_FILE_PATTERN: str = r"^([a-z]{2}(?:-[A-Z]{2})?)\.yaml$"

TRANSLATION_FILE_SUFFIX: str = ".yaml"

# ============================================================================
# LOGGING
# ============================================================================

# Warnings show more context as they're surfaced to users.
# Debug messages are high-volume, shorter keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
