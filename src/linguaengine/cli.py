"""Command line interface for keeping translation files in sync with code.

Usage:
    linguaengine extract ./src ./translations
    linguaengine extract ./src ./translations --remove
    linguaengine check ./translations --format json

Commands:
    extract   Scan Python sources for translation keys and update every
              translation file: missing keys are added with an empty value,
              files are rewritten with sorted keys
    check     Load a translation directory and report the first error

Exit Codes:
    0   Success
    1   Translation or language error (diagnostic printed to stderr)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from linguaengine.diagnostics import DiagnosticFormatter, LinguaError, OutputFormat
from linguaengine.extract import extract_keys
from linguaengine.localization import Container, write_directory

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linguaengine",
        description="Extract and update translations from source code.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add keys used in ./src to every file in ./translations
  linguaengine extract ./src ./translations

  # Also drop translations no longer used in ./src
  linguaengine extract ./src ./translations --remove
""",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log loading and extraction progress to stderr",
    )
    parser.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.RUST,
        help="Error output format (default: rust)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    extract = commands.add_parser(
        "extract",
        help="Scan SRC_DIR for translation keys and update the files in TRANSLATIONS_DIR",
    )
    extract.add_argument("src_dir", type=Path, metavar="SRC_DIR", help="Python source directory")
    extract.add_argument(
        "translations_dir",
        type=Path,
        metavar="TRANSLATIONS_DIR",
        help="Directory with one YAML file per language",
    )
    extract.add_argument(
        "--remove",
        action="store_true",
        help="Remove translations whose key was not found in SRC_DIR",
    )

    check = commands.add_parser("check", help="Validate the files in TRANSLATIONS_DIR")
    check.add_argument(
        "translations_dir",
        type=Path,
        metavar="TRANSLATIONS_DIR",
        help="Directory with one YAML file per language",
    )
    return parser


def run_extract(src_dir: Path, translations_dir: Path, *, remove: bool = False) -> list[Path]:
    """Synchronize translation files with the keys used in src_dir.

    Args:
        src_dir: Python source directory to scan
        translations_dir: Directory with the existing translation files
        remove: Drop translations whose key does not occur in src_dir

    Returns:
        Paths of the rewritten translation files

    Raises:
        LinguaError: If an existing translation file cannot be loaded
    """
    existing = Container.from_directory(translations_dir)
    keys = extract_keys(src_dir)
    found = frozenset(keys)

    raw = existing.raw()
    for language, messages in raw.items():
        added = 0
        for key in keys:
            if key not in messages:
                messages[key] = ""
                added += 1

        removed = 0
        if remove:
            for key in [key for key in messages if key not in found]:
                del messages[key]
                removed += 1

        logger.info("%s: %d keys added, %d removed", language, added, removed)

    return write_directory(raw, translations_dir)


def run_check(translations_dir: Path) -> Container:
    """Load translations_dir, raising on the first invalid file or template."""
    return Container.from_directory(translations_dir)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the linguaengine command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        match args.command:
            case "extract":
                written = run_extract(args.src_dir, args.translations_dir, remove=args.remove)
                print(f"Updated {len(written)} translation files in {args.translations_dir}")
            case "check":
                container = run_check(args.translations_dir)
                print(f"[OK] {container!r}")
            case _:
                parser.error(f"unknown command {args.command!r}")
    except LinguaError as e:
        if e.diagnostic is not None:
            print(DiagnosticFormatter(output_format=args.format).format(e.diagnostic), file=sys.stderr)
        else:
            print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
