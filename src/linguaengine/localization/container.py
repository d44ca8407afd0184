"""Translation container.

Maps (language, key) to a parsed Message, selects a language for each
request, and renders messages with the language's other messages as the
'replace' scope.

Language resolution:
    1. The requested language, else the context language (use_language()),
       else the container default
    2. A loaded language matching it exactly wins
    3. Else the first loaded language with the same base language
       (in sorted order: "en" before "en-GB" before "en-US")
    4. Else the default language; else no language and the key is returned

Thread Safety:
    Messages are immutable. Containers created with thread_safe=True guard
    their table with an RLock so loading and merging may run while other
    threads render.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from linguaengine.constants import LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING
from linguaengine.diagnostics import (
    ErrorTemplate,
    LinguaLanguageError,
    LinguaLoadError,
    LinguaSyntaxError,
)
from linguaengine.enums import MergeStrategy
from linguaengine.language import LanguageID, current_language, parse_language
from linguaengine.localization.loading import (
    DEFAULT_MATCHER,
    FileMatcher,
    decode_messages,
    discover_files,
)
from linguaengine.localization.types import RawMessages, SourcePath
from linguaengine.runtime import MessageRenderer, format_replacements
from linguaengine.syntax import Message, TemplateParser, serialize

__all__ = ["Container", "ScopedContainer", "merge"]

logger = logging.getLogger(__name__)

_STRING_SOURCE = "<string>"


def _as_language(language: str | LanguageID) -> LanguageID:
    if isinstance(language, LanguageID):
        return language
    return parse_language(language)


class Container:
    """Parsed translations for any number of languages.

    Parses every template once at load time; message() only renders.

    Example:
        >>> container = Container(default_language="en")
        >>> container.add_messages("en", {"greeting": "Hi :name|capitalize"})
        1
        >>> container.message("greeting", {"name": "ada"})
        'Hi Ada'
        >>> container.message("missing")
        'missing'
    """

    __slots__ = (
        "_default_language",
        "_lock",
        "_messages",
        "_parser",
        "_thread_safe",
    )

    def __init__(
        self,
        *,
        default_language: str | LanguageID | None = None,
        thread_safe: bool = False,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize an empty container.

        Args:
            default_language: Fallback when neither a requested nor a context
                language is available (keyword-only)
            thread_safe: Guard the message table with an RLock (keyword-only)
            max_source_size: Maximum template size passed to the parser

        Raises:
            LinguaLanguageError: If default_language cannot be parsed
        """
        self._default_language: LanguageID | None = (
            _as_language(default_language) if default_language is not None else None
        )
        self._messages: dict[LanguageID, dict[str, Message]] = {}
        self._parser = TemplateParser(max_source_size=max_source_size)
        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

        logger.info(
            "Container initialized (default_language=%s, thread_safe=%s)",
            self._default_language,
            thread_safe,
        )

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        matcher: FileMatcher = DEFAULT_MATCHER,
        *,
        default_language: str | LanguageID | None = None,
        thread_safe: bool = False,
        max_source_size: int | None = None,
    ) -> Container:
        """Load every translation file of a directory.

        Args:
            directory: Directory with one YAML file per language
            matcher: Selects translation files and derives their language

        Raises:
            LinguaLoadError: If a file cannot be found, read, decoded or parsed
        """
        container = cls(
            default_language=default_language,
            thread_safe=thread_safe,
            max_source_size=max_source_size,
        )
        files = discover_files(directory, matcher)
        for language in sorted(files):
            path = files[language]
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to read translation file %s: %s", path, e)
                raise LinguaLoadError(ErrorTemplate.invalid_yaml(str(path), str(e))) from e
            container.add_source(language, text, source_path=str(path))

        logger.info("Loaded %d languages from %s", len(files), directory)
        return container

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def default_language(self) -> LanguageID | None:
        """Fallback language (read-only)."""
        return self._default_language

    @property
    def is_thread_safe(self) -> bool:
        """Whether the message table is guarded by a lock (read-only)."""
        return self._thread_safe

    @property
    def languages(self) -> tuple[LanguageID, ...]:
        """Loaded languages in sorted order."""
        return tuple(sorted(self._messages))

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> Container(default_language="en")
            Container(languages=0, messages=0, default_language='en')
        """
        total = sum(len(table) for table in self._messages.values())
        default = str(self._default_language) if self._default_language else None
        return (
            f"Container(languages={len(self._messages)}, "
            f"messages={total}, "
            f"default_language={default!r})"
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def add_source(
        self,
        language: str | LanguageID,
        text: str,
        *,
        source_path: SourcePath | None = None,
    ) -> int:
        """Decode a YAML translation document and add its messages.

        Args:
            language: Language of the document
            text: YAML text
            source_path: Origin of the text for error messages

        Returns:
            Number of messages added

        Raises:
            LinguaLoadError: If the YAML or a template is invalid
        """
        try:
            raw = decode_messages(text, source_path or _STRING_SOURCE)
        except LinguaLoadError as e:
            logger.error("Failed to load %s: %s", source_path or _STRING_SOURCE, e)
            raise
        return self.add_messages(language, raw, source_path=source_path)

    def add_messages(
        self,
        language: str | LanguageID,
        messages: Mapping[str, str],
        *,
        source_path: SourcePath | None = None,
    ) -> int:
        """Parse raw templates and add them for language.

        All templates are parsed before any is added, so a syntax error
        leaves the container unchanged. Existing keys are replaced.

        Args:
            language: Language of the templates
            messages: Translation key -> raw template
            source_path: Origin of the templates for error messages

        Returns:
            Number of messages added

        Raises:
            LinguaLoadError: If a template fails to parse
            LinguaLanguageError: If language cannot be parsed
        """
        language_id = _as_language(language)
        parsed = self._parse_all(messages, source_path or _STRING_SOURCE)

        if self._lock is not None:
            with self._lock:
                self._store(language_id, parsed, source_path)
        else:
            self._store(language_id, parsed, source_path)
        return len(parsed)

    def _parse_all(self, messages: Mapping[str, str], source_path: SourcePath) -> dict[str, Message]:
        parsed: dict[str, Message] = {}
        for key, raw in messages.items():
            try:
                parsed[key] = self._parser.parse(raw)
            except LinguaSyntaxError as e:
                detail = e.diagnostic.message if e.diagnostic else str(e)
                logger.error(
                    "Failed to parse message %r in %s: %s",
                    key[:LOG_TRUNCATE_WARNING],
                    source_path,
                    detail,
                )
                raise LinguaLoadError(ErrorTemplate.template_invalid(source_path, key, detail)) from e
        return parsed

    def _store(
        self,
        language: LanguageID,
        parsed: dict[str, Message],
        source_path: SourcePath | None,
    ) -> None:
        table = self._messages.setdefault(language, {})
        for key, message in parsed.items():
            table[key] = message
            logger.debug("Registered message: %s", key[:LOG_TRUNCATE_DEBUG])

        if source_path:
            logger.info(
                "Added %d messages for %s from %s (%d total)",
                len(parsed),
                language,
                source_path,
                len(table),
            )
        else:
            logger.info("Added %d messages for %s (%d total)", len(parsed), language, len(table))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve_language(self, requested: str | LanguageID | None = None) -> LanguageID | None:
        """Select the loaded language to render in.

        Args:
            requested: Explicit language; an unparsable string is ignored
                with a warning

        Returns:
            Loaded language, the default language, or None
        """
        if self._lock is not None:
            with self._lock:
                return self._resolve_language_impl(requested)
        return self._resolve_language_impl(requested)

    def _resolve_language_impl(self, requested: str | LanguageID | None) -> LanguageID | None:
        wanted: LanguageID | None = None
        if requested is not None:
            try:
                wanted = _as_language(requested)
            except LinguaLanguageError:
                logger.warning(
                    "Ignoring unparsable language %s",
                    repr(str(requested))[:LOG_TRUNCATE_WARNING],
                )
        if wanted is None:
            wanted = current_language()
        if wanted is None:
            wanted = self._default_language
        if wanted is None:
            return None

        weak: LanguageID | None = None
        for candidate in sorted(self._messages):
            matched, exact = candidate.match(wanted)
            if matched and exact:
                return candidate
            if matched and weak is None:
                weak = candidate

        if weak is not None:
            return weak
        return self._default_language

    def has_message(self, key: str, *, language: str | LanguageID | None = None) -> bool:
        """Check whether key exists in the resolved language."""
        resolved = self.resolve_language(language)
        return resolved is not None and key in self._messages.get(resolved, {})

    def message(
        self,
        key: str,
        replacements: Mapping[str, object] | None = None,
        *,
        language: str | LanguageID | None = None,
    ) -> str:
        """Render the message for key.

        Never raises for missing data: without a resolvable language or
        message the key itself is returned; missing replacements stay
        visible as ':name'.

        Args:
            key: Translation key
            replacements: Values for the placeholders (formatted with
                format_replacement())
            language: Explicit language (default: context, then default language)

        Returns:
            Rendered message, or key when no message is found
        """
        if self._lock is not None:
            with self._lock:
                return self._message_impl(key, replacements, language)
        return self._message_impl(key, replacements, language)

    def _message_impl(
        self,
        key: str,
        replacements: Mapping[str, object] | None,
        language: str | LanguageID | None,
    ) -> str:
        resolved = self._resolve_language_impl(language)
        if resolved is None:
            logger.warning("No language resolvable for message %r", key[:LOG_TRUNCATE_WARNING])
            return key

        table = self._messages.get(resolved, {})
        template = table.get(key)
        if template is None:
            logger.warning(
                "Message %r not found for language %s", key[:LOG_TRUNCATE_WARNING], resolved
            )
            return key

        result = MessageRenderer(table).render(template, format_replacements(replacements))
        logger.debug("Resolved message %r: %r", key, result[:LOG_TRUNCATE_DEBUG])
        return result

    def scope(self, language: str | LanguageID | None = None) -> ScopedContainer:
        """Bind a language for repeated lookups.

        Args:
            language: Language to bind (default: the context language now)

        Raises:
            LinguaLanguageError: If language is a string that cannot be parsed
        """
        bound = _as_language(language) if language is not None else current_language()
        return ScopedContainer(self, bound)

    def messages(self, language: str | LanguageID) -> Mapping[str, Message]:
        """Read-only snapshot of the messages of exactly language."""
        language_id = _as_language(language)
        if self._lock is not None:
            with self._lock:
                return MappingProxyType(dict(self._messages.get(language_id, {})))
        return MappingProxyType(dict(self._messages.get(language_id, {})))

    def raw(self) -> dict[LanguageID, RawMessages]:
        """Export every message as template source.

        Templates are re-serialized from the parsed messages, so literal
        colons come back escaped and plural whitespace is normalized.
        """
        if self._lock is not None:
            with self._lock:
                return self._raw_impl()
        return self._raw_impl()

    def _raw_impl(self) -> dict[LanguageID, RawMessages]:
        return {
            language: {key: serialize(message) for key, message in table.items()}
            for language, table in self._messages.items()
        }

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def merge_from(
        self,
        source: Container,
        strategy: MergeStrategy = MergeStrategy.SKIP_AND_CLEAN,
    ) -> Container:
        """Merge source into this container in place.

        Returns:
            This container
        """
        incoming = {language: dict(table) for language, table in source._snapshot().items()}

        if self._lock is not None:
            with self._lock:
                self._merge_impl(incoming, strategy)
        else:
            self._merge_impl(incoming, strategy)
        return self

    def _snapshot(self) -> dict[LanguageID, dict[str, Message]]:
        if self._lock is not None:
            with self._lock:
                return {language: dict(table) for language, table in self._messages.items()}
        return {language: dict(table) for language, table in self._messages.items()}

    def _merge_impl(
        self,
        incoming: dict[LanguageID, dict[str, Message]],
        strategy: MergeStrategy,
    ) -> None:
        keep_existing = strategy in (MergeStrategy.SKIP, MergeStrategy.SKIP_AND_CLEAN)
        clean = strategy in (MergeStrategy.SKIP_AND_CLEAN, MergeStrategy.OVERWRITE_AND_CLEAN)
        added = removed = 0

        for language, table in incoming.items():
            for key, message in table.items():
                existing = self._messages.get(language)
                if keep_existing and existing is not None and key in existing:
                    continue
                self._messages.setdefault(language, {})[key] = message
                added += 1

        if clean:
            for language in list(self._messages):
                source_table = incoming.get(language)
                if source_table is None:
                    removed += len(self._messages.pop(language))
                    continue
                table = self._messages[language]
                for key in [key for key in table if key not in source_table]:
                    del table[key]
                    removed += 1

        logger.info(
            "Merged translations (strategy=%s): %d added or replaced, %d removed",
            strategy,
            added,
            removed,
        )


@dataclass(frozen=True, slots=True)
class ScopedContainer:
    """Container view bound to one language.

    Attributes:
        container: Underlying container
        language: Bound language (None: resolve per call)
    """

    container: Container
    language: LanguageID | None

    def message(self, key: str, replacements: Mapping[str, object] | None = None) -> str:
        """Render key in the bound language."""
        return self.container.message(key, replacements, language=self.language)


def merge(
    source: Container,
    target: Container,
    strategy: MergeStrategy = MergeStrategy.SKIP_AND_CLEAN,
) -> Container:
    """Merge messages from source into target.

    Strategies:
        SKIP                 keep existing target messages, add missing ones
        SKIP_AND_CLEAN       SKIP, then remove target messages absent from source
        OVERWRITE            source messages replace target messages
        OVERWRITE_AND_CLEAN  OVERWRITE, then remove target messages absent from source

    Cleaning removes whole languages that source does not have.

    Returns:
        target (modified in place)
    """
    return target.merge_from(source, strategy)
