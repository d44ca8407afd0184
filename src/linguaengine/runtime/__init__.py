"""Runtime rendering of parsed messages.

Python 3.13+.
"""

from .renderer import MessageRenderer, capitalize, estimate_length, parse_count, render
from .values import ReplacementValue, format_replacement, format_replacements

__all__ = [
    "MessageRenderer",
    "ReplacementValue",
    "capitalize",
    "estimate_length",
    "format_replacement",
    "format_replacements",
    "parse_count",
    "render",
]
