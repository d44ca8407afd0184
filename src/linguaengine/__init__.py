"""linguaengine - translation templates with placeholders, transformers and plurals.

Templates are plain strings with named placeholders (":name"), a chain of
transformers (":name|capitalize", ":field|replace") and count-based plural
selection (":n|plural(=0 {none} =1-2 {few} other {# items})"). Templates
are parsed once into an immutable Message and rendered many times.

Public API:
    Container - Translations for many languages with fallback resolution
    parse_template - Parse a template to a Message
    serialize_template - Serialize a Message back to template source
    render - Render a Message with replacement values
    use_language - Select the language for the enclosed block
    LanguageID / parse_language - Language identifiers validated with Babel
    MergeStrategy - How merge() combines two containers

Exceptions:
    LinguaError - Base exception class
    LinguaSyntaxError - Template lex/parse errors
    LinguaLoadError - Translation file errors
    LinguaLanguageError - Unparsable language tags

Submodules:
    linguaengine.syntax - Lexer, parser, operation tree, serializer
    linguaengine.runtime - Renderer and replacement value formatting
    linguaengine.localization - Translation files and containers
    linguaengine.introspection - Placeholder and transformer usage
    linguaengine.extract - Translation key extraction from Python code
    linguaengine.diagnostics - Error types and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    LinguaError,
    LinguaLanguageError,
    LinguaLoadError,
    LinguaSyntaxError,
)
from .enums import MergeStrategy
from .language import LanguageID, current_language, parse_language, use_language
from .localization import Container, Key, merge
from .runtime import render
from .syntax import parse as parse_template
from .syntax import serialize as serialize_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("linguaengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Container",
    "Key",
    "LanguageID",
    "LinguaError",
    "LinguaLanguageError",
    "LinguaLoadError",
    "LinguaSyntaxError",
    "MergeStrategy",
    "__version__",
    "current_language",
    "merge",
    "parse_language",
    "parse_template",
    "render",
    "serialize_template",
    "use_language",
]
