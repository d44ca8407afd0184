"""Tests for translation key extraction from Python source."""

from __future__ import annotations

import ast
import logging
import textwrap
from pathlib import Path

import pytest

from linguaengine.extract import collect_constants, extract_keys, extract_keys_from_source

VIEW_SOURCE = textwrap.dedent(
    """
    from app import Key, container

    GREETING: Key = "greeting"
    FAREWELL = "farewell"
    TITLE = Key("title")

    def view(name):
        container.message(GREETING, {"name": name})
        container.message(FAREWELL)
        container.message("inline")
        container.message(key="keyword")
        container.message(Key("wrapped"))
        container.message(name)
        log("not.a.key")
    """
)


class TestExtractFromSource:
    """Test key collection from one module."""

    def test_recognized_forms(self) -> None:
        """Markers, annotated constants and message() calls are collected in order."""
        assert extract_keys_from_source(VIEW_SOURCE) == (
            "greeting",
            "title",
            "farewell",
            "inline",
            "keyword",
            "wrapped",
        )

    def test_duplicates_removed(self) -> None:
        """Each key is reported once, at its first appearance."""
        source = 'message("b")\nmessage("a")\nmessage("b")\n'
        assert extract_keys_from_source(source) == ("b", "a")

    def test_dynamic_keys_are_ignored(self) -> None:
        """Keys computed at runtime cannot be extracted."""
        source = 'message(prefix + "x")\nmessage(f"{name}")\nmessage()\n'
        assert extract_keys_from_source(source) == ()

    def test_custom_function_names(self) -> None:
        """Other call names can be configured."""
        source = 't("a")\nmessage("b")\n'
        assert extract_keys_from_source(source, functions=frozenset({"t"})) == ("a",)

    def test_syntax_error_propagates(self) -> None:
        """Invalid Python raises SyntaxError for a single module."""
        with pytest.raises(SyntaxError):
            extract_keys_from_source("def broken(:\n")

    def test_collect_constants(self) -> None:
        """Only module-level string bindings are constants."""
        tree = ast.parse(
            textwrap.dedent(
                """
                A = "a"
                B: Key = "b"
                C = Key("c")
                D = 4
                def f():
                    E = "e"
                """
            )
        )
        assert collect_constants(tree) == {"A": "a", "B": "b", "C": "c"}


class TestExtractKeys:
    """Test directory walking."""

    def test_walks_directory(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Python files are scanned in sorted order; broken and hidden files are skipped."""
        (tmp_path / "a.py").write_text('message("a")\n', encoding="utf-8")
        (tmp_path / "broken.py").write_text("def broken(:\n", encoding="utf-8")
        (tmp_path / "notes.txt").write_text('message("txt")\n', encoding="utf-8")
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "b.py").write_text('message("b")\nmessage("a")\n', encoding="utf-8")
        hidden = tmp_path / ".venv"
        hidden.mkdir()
        (hidden / "c.py").write_text('message("hidden")\n', encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="linguaengine.extract"):
            keys = extract_keys(tmp_path)

        assert keys == ("a", "b")
        assert "Skipping unreadable source file" in caplog.text

    def test_single_file(self, tmp_path: Path) -> None:
        """A file path is scanned on its own."""
        path = tmp_path / "view.py"
        path.write_text(VIEW_SOURCE, encoding="utf-8")

        assert extract_keys(path)[0] == "greeting"

    def test_empty_directory(self, tmp_path: Path) -> None:
        """No Python files means no keys."""
        assert extract_keys(tmp_path) == ()
