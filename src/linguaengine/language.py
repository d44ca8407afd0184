"""Language identifiers, parsing and context-scoped selection.

A LanguageID is a base language plus an optional region ("en", "en-US").
Parsing accepts loose input ("EN_us", "zh-Hant-TW", "de-DE.UTF-8") and
validates it against Babel's CLDR data: the base language must be known,
and the region is kept only when Babel knows it as a territory.

The active language of the current thread or task is held in a ContextVar,
so concurrent requests can each render in their own language without
passing it explicitly.

Python 3.13+. Runtime dependency: Babel.
"""

from __future__ import annotations

import functools
import logging
import re
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import TYPE_CHECKING

from linguaengine.constants import LOG_TRUNCATE_WARNING
from linguaengine.diagnostics import ErrorTemplate, LinguaLanguageError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LanguageID",
    "LanguageScope",
    "current_language",
    "get_babel_locale",
    "must_parse_language",
    "parse_language",
    "reset_language",
    "set_language",
    "try_parse_language",
    "use_language",
]

logger = logging.getLogger(__name__)

# language[-_script][-_region]; region is two letters or a UN M.49 number.
_LANGUAGE_PATTERN = re.compile(
    r"([a-z]{2,8})(?:[-_]([a-z]{4}))?(?:[-_]([a-z]{2}|\d{3}))?",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True, order=True)
class LanguageID:
    """Language with optional region.

    Ordering is lexicographic on (language, region), which gives containers
    a stable iteration order.

    Attributes:
        language: Lowercase base language ("en")
        region: Uppercase region or M.49 code ("US", "419"), or ""

    Example:
        >>> str(LanguageID("en", "US"))
        'en-US'
        >>> LanguageID("en", "US").match(LanguageID("en"))
        (True, False)
    """

    language: str
    region: str = ""

    def __str__(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @property
    def is_empty(self) -> bool:
        """True when no language is set."""
        return not self.language

    def match(self, other: LanguageID) -> tuple[bool, bool]:
        """Compare with other.

        Returns:
            (match, exact): match when the base languages are equal,
            exact when the regions are equal as well
        """
        if self.is_empty or self.language != other.language:
            return (False, False)
        return (True, self.region == other.region)


# Language selected for the current thread or task.
_current_language: ContextVar[LanguageID | None] = ContextVar(
    "linguaengine_language", default=None
)


@functools.lru_cache(maxsize=128)
def get_babel_locale(language: str) -> Locale:
    """Get a Babel Locale for a base language with caching.

    Raises:
        babel.core.UnknownLocaleError: If language is not recognized
        ValueError: If language format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(language)


@functools.lru_cache(maxsize=256)
def parse_language(raw: str) -> LanguageID:
    """Parse a language tag.

    The first language[-script][-region] occurrence in raw is used. The
    script subtag is accepted and dropped.

    Args:
        raw: Language tag in any case, with '-' or '_' separators

    Returns:
        Normalized LanguageID

    Raises:
        LinguaLanguageError: If no tag is found or Babel does not know the language

    Example:
        >>> parse_language("en_us")
        LanguageID(language='en', region='US')
        >>> parse_language("zh-Hant-TW")
        LanguageID(language='zh', region='TW')
    """
    found = _LANGUAGE_PATTERN.search(raw)
    if found is None:
        raise LinguaLanguageError(ErrorTemplate.language_invalid(raw))

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import UnknownLocaleError  # noqa: PLC0415

    language = found.group(1).lower()
    try:
        babel_locale = get_babel_locale(language)
    except (UnknownLocaleError, ValueError) as e:
        raise LinguaLanguageError(ErrorTemplate.language_unknown(raw, str(e))) from None

    region = (found.group(3) or "").upper()
    if region and region not in babel_locale.territories:
        logger.debug("Dropping unknown region %r from language %r", region, raw)
        region = ""

    return LanguageID(babel_locale.language, region)


def must_parse_language(raw: str) -> LanguageID:
    """Parse a language tag, raising on failure.

    Alias of parse_language() for call sites that read better with the
    failure mode in the name (module-level constants, configuration).
    """
    return parse_language(raw)


def try_parse_language(raw: str) -> LanguageID | None:
    """Parse a language tag, returning None on failure."""
    try:
        return parse_language(raw)
    except LinguaLanguageError:
        return None


def _coerce(language: str | LanguageID) -> LanguageID:
    if isinstance(language, LanguageID):
        return language
    return parse_language(language)


def current_language() -> LanguageID | None:
    """Language selected for the current context, or None."""
    return _current_language.get()


def set_language(language: str | LanguageID) -> Token[LanguageID | None]:
    """Select language for the current context.

    Returns:
        Token for reset_language()

    Raises:
        LinguaLanguageError: If language is a string that cannot be parsed
    """
    return _current_language.set(_coerce(language))


def reset_language(token: Token[LanguageID | None]) -> None:
    """Restore the language that was active before set_language()."""
    _current_language.reset(token)


class LanguageScope:
    """Context manager selecting a language for the enclosed block.

    Unparsable input leaves the current language unchanged and logs a
    warning, so request handlers can pass user-supplied tags directly.

    Usage:
        with use_language(request.user.language):
            container.message("greeting", {"name": name})
    """

    __slots__ = ("_language", "_raw", "_token")

    def __init__(self, language: str | LanguageID) -> None:
        self._raw = language
        self._language: LanguageID | None = None
        self._token: Token[LanguageID | None] | None = None

    def __enter__(self) -> LanguageID | None:
        """Enter scope, returning the active language."""
        try:
            self._language = _coerce(self._raw)
        except LinguaLanguageError:
            logger.warning(
                "Ignoring unparsable language %s",
                repr(str(self._raw))[:LOG_TRUNCATE_WARNING],
            )
            return current_language()
        self._token = _current_language.set(self._language)
        return self._language

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit scope, restoring the previous language."""
        if self._token is not None:
            _current_language.reset(self._token)
            self._token = None


def use_language(language: str | LanguageID) -> LanguageScope:
    """Select language for a with-block.

    Example:
        >>> with use_language("de-DE"):
        ...     str(current_language())
        'de-DE'
    """
    return LanguageScope(language)
