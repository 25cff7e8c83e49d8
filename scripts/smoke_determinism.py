#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of both search strategies."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from contracts import make_result, validate_result
from grid import load_grid
from project_config import get_section
from solver import STRATEGIES, solved


def _run(strategy: str) -> str:
    puzzle = load_grid(ROOT / str(get_section("io.input_path", "input.txt")))
    artifact = make_result(puzzle, solved(puzzle, strategy), elapsed_ms=0)
    validate_result(artifact)
    return artifact["artifact_id"]


def main() -> int:
    ids = {}
    for strategy in sorted(STRATEGIES):
        first = _run(strategy)
        second = _run(strategy)
        if first != second:
            print(f"determinism failed for {strategy}: {first} vs {second}")
            return 1
        ids[strategy] = first

    if len(set(ids.values())) != 1:
        print(f"strategies disagree: {ids}")
        return 1

    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
