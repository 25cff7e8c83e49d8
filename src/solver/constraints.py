"""Row, column and box uniqueness checks."""

from __future__ import annotations

from typing import List

from grid.model import DIGITS, EMPTY, Grid


def is_legal(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Return ``True`` when ``digit`` may be placed at ``(row, col)``.

    Only the other cells of the row, column and box are inspected; the
    target cell's own value does not count against the digit.
    """

    return digit not in grid.peer_values(row, col)


def candidates(grid: Grid, row: int, col: int) -> List[int]:
    """Digits legal at ``(row, col)`` in ascending order."""

    taken = grid.peer_values(row, col)
    return [digit for digit in DIGITS if digit not in taken]


def givens_consistent(grid: Grid) -> bool:
    for coord, value in grid.cells():
        if value != EMPTY and not is_legal(grid, coord.row, coord.col, value):
            return False
    return True


__all__ = ["candidates", "givens_consistent", "is_legal"]
