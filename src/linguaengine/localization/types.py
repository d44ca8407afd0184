"""Type aliases for the localization domain.

Provides semantic types used throughout the localization package and by
user code when annotating translation keys.

Python 3.13+. Zero external dependencies.
"""

from typing import NewType

__all__ = [
    "Key",
    "RawMessages",
    "RawTemplate",
    "SourcePath",
]

Key = NewType("Key", str)
"""Translation key. Wrapping literals in Key() marks them for the key extractor.

Example:
    >>> GREETING = Key("greeting")
    >>> container.message(GREETING, {"name": "Ada"})
"""

type RawTemplate = str
"""Unparsed template text as written in a translation file."""

type RawMessages = dict[str, RawTemplate]
"""Translation file contents: key -> raw template."""

type SourcePath = str
"""Human-readable origin of translation text, used in diagnostics."""
