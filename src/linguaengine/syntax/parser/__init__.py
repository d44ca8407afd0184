"""Template parser package.

Module Organization:
- core.py: TemplateParser class and size limit
- rules.py: Grammar rules (operations, transformer chains, plural cases)

Public API:
    TemplateParser: Main parser class
    ParseContext: Per-parse state (advanced usage)
"""

from linguaengine.syntax.parser.core import TemplateParser
from linguaengine.syntax.parser.rules import ParseContext

__all__ = ["ParseContext", "TemplateParser"]
