"""Translation file discovery, decoding and encoding.

Translation files are flat YAML mappings of translation keys to raw
templates, one file per language in a single directory:

    translations/
        en.yaml       greeting: "Hi :name|capitalize"
        en-US.yaml
        nl.yaml

Components:
    FileMatcher - Protocol deciding which files are translations and their language
    RegexFileMatcher - Matcher using the first capture group as the language
    DEFAULT_MATCHER - Matches "en.yaml" and "en-US.yaml"
    decode_messages / encode_messages - YAML <-> key/template mapping
    discover_files / write_directory - Directory level helpers

Python 3.13+. Runtime dependency: PyYAML.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Protocol

import yaml

from linguaengine.constants import DEFAULT_FILE_PATTERN, TRANSLATION_FILE_SUFFIX
from linguaengine.diagnostics import ErrorTemplate, LinguaLanguageError, LinguaLoadError
from linguaengine.language import LanguageID, parse_language
from linguaengine.localization.types import RawMessages, SourcePath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Matchers
    "FileMatcher",
    "RegexFileMatcher",
    "DEFAULT_MATCHER",
    # Decoding
    "decode_messages",
    "load_file",
    "discover_files",
    # Encoding
    "encode_messages",
    "write_directory",
]

logger = logging.getLogger(__name__)


class FileMatcher(Protocol):
    """Protocol for selecting translation files in a directory.

    This is a Protocol (structural typing) rather than ABC so any object with
    these two methods can be passed to Container.from_directory().

    Example:
        >>> class PrefixMatcher:
        ...     def is_match(self, name: str) -> bool:
        ...         return name.startswith("messages.")
        ...     def language_id(self, name: str) -> LanguageID:
        ...         return parse_language(name.split(".")[1])
    """

    def is_match(self, name: str) -> bool:
        """Check whether the file name is a translation file."""

    def language_id(self, name: str) -> LanguageID:
        """Language of a matching file.

        Raises:
            LinguaLoadError: If no language can be derived from name
        """


class RegexFileMatcher:
    """Match file names with a regex whose first capture group is the language.

    Attributes:
        pattern: Compiled file name pattern

    Example:
        >>> matcher = RegexFileMatcher(r"^messages\\.([a-z]{2})\\.yml$")
        >>> matcher.is_match("messages.nl.yml")
        True
        >>> str(matcher.language_id("messages.nl.yml"))
        'nl'
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled file name pattern."""
        return self._pattern

    def __repr__(self) -> str:
        return f"RegexFileMatcher({self._pattern.pattern!r})"

    def is_match(self, name: str) -> bool:
        """Check whether name matches the pattern."""
        return self._pattern.search(name) is not None

    def language_id(self, name: str) -> LanguageID:
        """Parse the language captured by the first group.

        Raises:
            LinguaLoadError: If the pattern has no group, does not match,
                or captures an unparsable language
        """
        if self._pattern.groups < 1:
            raise LinguaLoadError(ErrorTemplate.matcher_no_group(name))

        found = self._pattern.search(name)
        if found is None or found.group(1) is None:
            diagnostic = dataclasses.replace(ErrorTemplate.language_invalid(name), source_path=name)
            raise LinguaLoadError(diagnostic)

        try:
            return parse_language(found.group(1))
        except LinguaLanguageError as e:
            diagnostic = e.diagnostic or ErrorTemplate.language_invalid(found.group(1))
            raise LinguaLoadError(dataclasses.replace(diagnostic, source_path=name)) from e


DEFAULT_MATCHER: FileMatcher = RegexFileMatcher(DEFAULT_FILE_PATTERN)


# ============================================================================
# DECODING
# ============================================================================


def _scalar_text(value: object) -> str:
    """Text of a YAML scalar as the template source it was written as."""
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case _:
            return str(value)


def decode_messages(
    content: str | bytes | IO[str] | IO[bytes],
    source_path: SourcePath = "<string>",
) -> RawMessages:
    """Decode a YAML translation document.

    Args:
        content: YAML text, bytes, or an open stream
        source_path: Origin of the content, used in diagnostics

    Returns:
        Mapping of translation key to raw template. An empty document
        decodes to an empty mapping; scalar values are converted to text
        (null -> "", booleans -> "true"/"false").

    Raises:
        LinguaLoadError: If the YAML is invalid, the document is not a
            mapping, or a value is a list or mapping

    Example:
        >>> decode_messages("greeting: Hi :name\\nempty:\\n")
        {'greeting': 'Hi :name', 'empty': ''}
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LinguaLoadError(ErrorTemplate.invalid_yaml(source_path, str(e))) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise LinguaLoadError(ErrorTemplate.not_a_mapping(source_path, type(document).__name__))

    messages: RawMessages = {}
    for key, value in document.items():
        name = _scalar_text(key)
        if isinstance(value, (dict, list)):
            raise LinguaLoadError(
                ErrorTemplate.value_not_scalar(source_path, name, type(value).__name__)
            )
        messages[name] = _scalar_text(value)
    return messages


def load_file(path: str | Path) -> RawMessages:
    """Read and decode one translation file.

    Raises:
        LinguaLoadError: If the file cannot be read or decoded
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LinguaLoadError(ErrorTemplate.invalid_yaml(str(file_path), str(e))) from e
    return decode_messages(text, str(file_path))


def discover_files(
    directory: str | Path,
    matcher: FileMatcher = DEFAULT_MATCHER,
) -> dict[LanguageID, Path]:
    """Find translation files in directory (not recursive).

    Args:
        directory: Directory containing translation files
        matcher: Selects translation files and derives their language

    Returns:
        Mapping of language to file path

    Raises:
        LinguaLoadError: If the directory cannot be read, two files resolve
            to the same language, or a file name has an unparsable language
    """
    root = Path(directory)
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        raise LinguaLoadError(ErrorTemplate.directory_unreadable(str(root), str(e))) from e

    files: dict[LanguageID, Path] = {}
    for entry in entries:
        if entry.is_dir():
            continue
        if not matcher.is_match(entry.name):
            logger.debug("Skipping non-translation file %r", entry.name)
            continue

        language = matcher.language_id(entry.name)
        if language in files:
            raise LinguaLoadError(ErrorTemplate.duplicate_language(entry.name, str(language)))
        files[language] = entry

    return files


# ============================================================================
# ENCODING
# ============================================================================


class _QuotedTemplate(str):
    """Template value written in double-quoted style."""

    __slots__ = ()


class _TranslationDumper(yaml.SafeDumper):
    """SafeDumper writing template values double-quoted."""


def _represent_template(dumper: yaml.SafeDumper, data: _QuotedTemplate) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


_TranslationDumper.add_representer(_QuotedTemplate, _represent_template)

# Long templates stay on one line
_DUMP_WIDTH = 1 << 16


def encode_messages(messages: Mapping[str, str]) -> str:
    """Encode translations as YAML with sorted keys and double-quoted values.

    Example:
        >>> print(encode_messages({"b": "Bye", "a": "Hi :name"}), end="")
        a: "Hi :name"
        b: "Bye"
    """
    document = {key: _QuotedTemplate(messages[key]) for key in sorted(messages)}
    return yaml.dump(
        document,
        Dumper=_TranslationDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=_DUMP_WIDTH,
    )


def write_directory(
    raw: Mapping[LanguageID, Mapping[str, str]],
    directory: str | Path,
) -> list[Path]:
    """Write one "<language>.yaml" file per language.

    Args:
        raw: Templates per language, e.g. from Container.raw()
        directory: Target directory (created if missing)

    Returns:
        Paths written, in language order
    """
    root = Path(directory)
    root.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for language in sorted(raw):
        path = root / f"{language}{TRANSLATION_FILE_SUFFIX}"
        path.write_text(encode_messages(raw[language]), encoding="utf-8")
        logger.info("Wrote %d messages to %s", len(raw[language]), path)
        written.append(path)
    return written
