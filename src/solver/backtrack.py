"""Depth-first backtracking search over empty cells.

Cells are visited in row-major order and digits are tried from 1 to 9, so a
given puzzle always yields the same solution.  Both search forms mutate the
grid in place and leave it exactly as it was when no solution exists.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from grid.model import Coord, Grid

from .constraints import candidates, givens_consistent

_LOGGER = logging.getLogger(__name__)

Strategy = Callable[[Grid], bool]


def _search(grid: Grid, start: Optional[Coord]) -> bool:
    coord = grid.first_empty(start)
    if coord is None:
        return True

    # The grid is identical before every trial here, so the legal set is too.
    for digit in candidates(grid, coord.row, coord.col):
        grid.set(coord.row, coord.col, digit)
        if _search(grid, coord.next()):
            return True
        grid.clear(coord.row, coord.col)
    return False


def solve(grid: Grid) -> bool:
    """Fill ``grid`` in place; return ``False`` if it cannot be completed."""

    if not givens_consistent(grid):
        _LOGGER.debug("givens conflict, skipping search")
        return False
    _LOGGER.debug("recursive search started: %s", grid.to_string())
    found = _search(grid, None)
    _LOGGER.debug("recursive search finished: solved=%s", found)
    return found


def solve_iterative(grid: Grid) -> bool:
    """Explicit-stack form of :func:`solve` with the same visiting order."""

    if not givens_consistent(grid):
        _LOGGER.debug("givens conflict, skipping search")
        return False

    _LOGGER.debug("iterative search started: %s", grid.to_string())
    stack: List[Tuple[Coord, int]] = []
    coord = grid.first_empty()
    next_digit = 1
    while coord is not None:
        for digit in candidates(grid, coord.row, coord.col):
            if digit < next_digit:
                continue
            grid.set(coord.row, coord.col, digit)
            stack.append((coord, digit))
            coord = grid.first_empty(coord.next())
            next_digit = 1
            break
        else:
            if not stack:
                _LOGGER.debug("iterative search finished: solved=False")
                return False
            coord, last = stack.pop()
            grid.clear(coord.row, coord.col)
            next_digit = last + 1
    _LOGGER.debug("iterative search finished: solved=True")
    return True


STRATEGIES: Dict[str, Strategy] = {
    "recursive": solve,
    "iterative": solve_iterative,
}


def get_strategy(name: str) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown solver strategy '{name}'; expected one of {sorted(STRATEGIES)}"
        ) from exc


def solved(grid: Grid, strategy: str = "recursive") -> Optional[Grid]:
    """Return a solved copy of ``grid`` or ``None``; ``grid`` is not modified."""

    work = grid.copy()
    if get_strategy(strategy)(work):
        return work
    return None


__all__ = ["STRATEGIES", "Strategy", "get_strategy", "solve", "solve_iterative", "solved"]
