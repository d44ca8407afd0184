"""Translation key extraction from Python source code.

Scans Python files for translation keys so translation files can be kept
in sync with the code. Recognized forms:

    Key("greeting")                       # explicit marker
    GREETING: Key = "greeting"            # annotated constant
    container.message("greeting", ...)    # first argument of message()
    container.message(GREETING, ...)      # module-level string constant
    scoped.message(key="greeting")

Only literal strings and module-level names bound to literal strings are
resolved; keys built at runtime are invisible to the extractor.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

__all__ = [
    "KeyCollector",
    "collect_constants",
    "extract_keys",
    "extract_keys_from_source",
]

logger = logging.getLogger(__name__)

_KEY_MARKER = "Key"
_DEFAULT_FUNCTIONS = frozenset({"message"})


def _callee_name(func: ast.expr) -> str | None:
    match func:
        case ast.Name(id=name):
            return name
        case ast.Attribute(attr=name):
            return name
        case _:
            return None


def _string_constant(node: ast.expr | None) -> str | None:
    match node:
        case ast.Constant(value=str() as value):
            return value
        case ast.Call(func=func, args=[ast.Constant(value=str() as value), *_]) if (
            _callee_name(func) == _KEY_MARKER
        ):
            return value
        case _:
            return None


def _is_key_annotation(annotation: ast.expr) -> bool:
    return _callee_name(annotation) == _KEY_MARKER


def collect_constants(tree: ast.Module) -> dict[str, str]:
    """Module-level names bound to string literals (or Key("...") calls)."""
    constants: dict[str, str] = {}
    for statement in tree.body:
        match statement:
            case ast.Assign(targets=[ast.Name(id=name)], value=value):
                text = _string_constant(value)
            case ast.AnnAssign(target=ast.Name(id=name), value=value):
                text = _string_constant(value)
            case _:
                continue
        if text is not None:
            constants[name] = text
    return constants


class KeyCollector(ast.NodeVisitor):
    """AST visitor collecting translation keys in source order.

    Attributes:
        keys: Keys found, in order of appearance (may contain duplicates)
    """

    def __init__(
        self,
        constants: dict[str, str] | None = None,
        functions: frozenset[str] = _DEFAULT_FUNCTIONS,
    ) -> None:
        self.constants = constants or {}
        self.functions = functions
        self.keys: list[str] = []

    def _add(self, key: str | None) -> None:
        if key:
            self.keys.append(key)

    def _resolve(self, node: ast.expr | None) -> str | None:
        if isinstance(node, ast.Name):
            return self.constants.get(node.id)
        return _string_constant(node)

    def visit_Call(self, node: ast.Call) -> None:  # noqa: N802 - ast.NodeVisitor API
        name = _callee_name(node.func)
        if name == _KEY_MARKER and node.args:
            match node.args[0]:
                case ast.Constant(value=str() as value):
                    self._add(value)
        elif name in self.functions:
            argument: ast.expr | None = node.args[0] if node.args else None
            if argument is None:
                argument = next((kw.value for kw in node.keywords if kw.arg == "key"), None)
            # Key("...") arguments are picked up when visiting the nested call
            if not (isinstance(argument, ast.Call) and _callee_name(argument.func) == _KEY_MARKER):
                self._add(self._resolve(argument))
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:  # noqa: N802 - ast.NodeVisitor API
        if _is_key_annotation(node.annotation) and isinstance(node.value, ast.Constant):
            self._add(_string_constant(node.value))
        self.generic_visit(node)


def extract_keys_from_source(
    source: str,
    filename: str = "<string>",
    *,
    functions: frozenset[str] = _DEFAULT_FUNCTIONS,
) -> tuple[str, ...]:
    """Extract keys from one Python module.

    Args:
        source: Python source code
        filename: Name used in syntax error messages
        functions: Call names whose first argument is a translation key

    Returns:
        Keys in order of first appearance

    Raises:
        SyntaxError: If source is not valid Python

    Example:
        >>> extract_keys_from_source('GREETING = "greeting"\\nc.message(GREETING)\\n')
        ('greeting',)
    """
    tree = ast.parse(source, filename=filename)
    collector = KeyCollector(collect_constants(tree), functions)
    collector.visit(tree)
    return tuple(dict.fromkeys(collector.keys))


def extract_keys(
    root: str | Path,
    *,
    functions: frozenset[str] = _DEFAULT_FUNCTIONS,
) -> tuple[str, ...]:
    """Extract keys from every Python file below root.

    Files are visited in sorted path order; hidden directories are skipped.
    Files that cannot be read or parsed are logged and skipped.

    Args:
        root: Source directory (or a single .py file)
        functions: Call names whose first argument is a translation key

    Returns:
        Keys in order of first appearance, without duplicates
    """
    base = Path(root)
    paths = [base] if base.is_file() else sorted(base.rglob("*.py"))

    keys: dict[str, None] = {}
    for path in paths:
        relative = path.relative_to(base) if path != base else Path(path.name)
        if any(part.startswith(".") for part in relative.parts[:-1]):
            continue
        try:
            found = extract_keys_from_source(
                path.read_text(encoding="utf-8"), str(path), functions=functions
            )
        except (OSError, UnicodeDecodeError, SyntaxError, ValueError) as e:
            logger.warning("Skipping unreadable source file %s: %s", path, e)
            continue
        logger.debug("Found %d keys in %s", len(found), path)
        keys.update(dict.fromkeys(found))

    logger.info("Extracted %d keys from %s", len(keys), base)
    return tuple(keys)
