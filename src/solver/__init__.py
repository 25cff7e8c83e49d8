"""Backtracking solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .backtrack import STRATEGIES, get_strategy, solve, solve_iterative, solved
from .constraints import candidates, givens_consistent, is_legal
from .settings import SolveSettings, resolve_settings
from .validate import validate

__all__ = [
    "STRATEGIES",
    "SolveSettings",
    "candidates",
    "get_strategy",
    "givens_consistent",
    "is_legal",
    "resolve_settings",
    "solve",
    "solve_iterative",
    "solved",
    "validate",
]
