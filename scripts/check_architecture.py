#!/usr/bin/env python3
"""Layering and size checks for the nepali_font_converter package."""

from __future__ import annotations

import ast
from collections.abc import Iterator
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/nepali_font_converter"
USE_CASES = PACKAGE / "application/use_cases.py"
MAX_USE_CASE_STATEMENTS = 30

# Pure text modules must stay usable without a service or a host.
PURE_MODULES = ("classify.py", "segment.py", "types.py", "fonts/registry.py")
PURE_BANNED = (
    "nepali_font_converter.application",
    "nepali_font_converter.client",
    "nepali_font_converter.adapters",
    "httpx",
    "typer",
)
APPLICATION_BANNED = ("nepali_font_converter.adapters", "httpx", "typer")


def _imported_modules(path: Path) -> Iterator[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            yield node.module


def _violations(path: Path, banned: tuple[str, ...]) -> list[str]:
    found: list[str] = []
    for module in _imported_modules(path):
        for prefix in banned:
            if module == prefix or module.startswith(prefix + "."):
                found.append(f"{path.relative_to(ROOT)} imports {module}")
    return found


def _oversized_use_cases() -> list[str]:
    tree = ast.parse(USE_CASES.read_text(encoding="utf-8"))
    found: list[str] = []
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef):
            continue
        count = sum(isinstance(child, ast.stmt) for child in ast.walk(node)) - 1
        if count > MAX_USE_CASE_STATEMENTS:
            found.append(f"{node.name} has {count} statements")
    return found


def collect_problems() -> list[str]:
    """Return every layering or size problem found in the package."""
    problems: list[str] = []
    for path in PACKAGE.rglob("*.py"):
        if path.parent.name != "adapters":
            problems += _violations(path, ("httpx",))
    for path in (PACKAGE / "application").glob("*.py"):
        problems += _violations(path, APPLICATION_BANNED)
    for name in PURE_MODULES:
        problems += _violations(PACKAGE / name, PURE_BANNED)
    problems += _oversized_use_cases()
    return problems


def main() -> None:
    """Run repository architecture checks."""
    problems = collect_problems()
    if problems:
        raise SystemExit(
            "Architecture checks failed:\n" + "\n".join(f"- {p}" for p in problems)
        )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
