#!/usr/bin/env python3
"""Simple complexity guard for the generation pipeline."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGETS = (
    ROOT / "src/icon_generator/application/use_cases.py",
    ROOT / "src/icon_generator/application/planning.py",
)
MAX_STATEMENTS = 25


def main() -> None:
    """Fail when pipeline functions exceed the statement threshold."""
    violations: list[str] = []
    for target in TARGETS:
        tree = ast.parse(target.read_text(encoding="utf-8"))
        for node in tree.body:
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                stmt_count = len(node.body)
                if stmt_count > MAX_STATEMENTS:
                    violations.append(f"{target.name}:{node.name}: {stmt_count} statements")
    if violations:
        raise SystemExit(
            "Pipeline complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Pipeline complexity check passed.")


if __name__ == "__main__":
    main()
