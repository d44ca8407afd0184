"""Translation files and containers.

Python 3.13+.
"""

from .container import Container, ScopedContainer, merge
from .loading import (
    DEFAULT_MATCHER,
    FileMatcher,
    RegexFileMatcher,
    decode_messages,
    discover_files,
    encode_messages,
    load_file,
    write_directory,
)
from .types import Key, RawMessages, RawTemplate, SourcePath

__all__ = [
    "DEFAULT_MATCHER",
    "Container",
    "FileMatcher",
    "Key",
    "RawMessages",
    "RawTemplate",
    "RegexFileMatcher",
    "ScopedContainer",
    "SourcePath",
    "decode_messages",
    "discover_files",
    "encode_messages",
    "load_file",
    "merge",
    "write_directory",
]
