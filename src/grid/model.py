"""Mutable 9x9 grid used by the backtracking solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Set

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))


class CoordinateError(IndexError):
    """Raised when a row or column index falls outside the 9x9 board."""


@dataclass(frozen=True)
class Coord:
    """Position of a single cell."""

    row: int
    col: int

    def next(self) -> Optional["Coord"]:
        """Return the following cell in row-major order, ``None`` after (8, 8)."""

        if self.col < SIZE - 1:
            return Coord(self.row, self.col + 1)
        if self.row < SIZE - 1:
            return Coord(self.row + 1, 0)
        return None

    @property
    def house(self) -> int:
        return house_index(self.row, self.col)


def house_index(row: int, col: int) -> int:
    return (row // BOX) * BOX + col // BOX


def _check_coord(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise CoordinateError(f"cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")


class Grid:
    """Row-major 9x9 board; ``EMPTY`` marks an unfilled cell."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Sequence[Sequence[int]]] = None) -> None:
        if cells is None:
            self._cells: List[List[int]] = [[EMPTY] * SIZE for _ in range(SIZE)]
            return
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise ValueError(f"grid must be {SIZE} rows of {SIZE} cells")
        self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]
        for r, row in enumerate(cells):
            for c, value in enumerate(row):
                self.set(r, c, value)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Grid":
        return cls([list(row) for row in rows])

    def get(self, row: int, col: int) -> int:
        _check_coord(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        _check_coord(row, col)
        if not isinstance(value, int) or not (EMPTY <= value <= SIZE):
            raise ValueError(f"cell value must be {EMPTY}..{SIZE}, got {value!r}")
        self._cells[row][col] = value

    def clear(self, row: int, col: int) -> None:
        self.set(row, col, EMPTY)

    def is_complete(self) -> bool:
        return all(value != EMPTY for row in self._cells for value in row)

    def first_empty(self, start: Optional[Coord] = None) -> Optional[Coord]:
        """Return the first empty cell at or after ``start`` in row-major order."""

        coord: Optional[Coord] = start or Coord(0, 0)
        while coord is not None:
            if self._cells[coord.row][coord.col] == EMPTY:
                return coord
            coord = coord.next()
        return None

    def row_values(self, row: int) -> Set[int]:
        _check_coord(row, 0)
        return {value for value in self._cells[row] if value != EMPTY}

    def col_values(self, col: int) -> Set[int]:
        _check_coord(0, col)
        return {row[col] for row in self._cells if row[col] != EMPTY}

    def house_values(self, house: int) -> Set[int]:
        if not 0 <= house < SIZE:
            raise CoordinateError(f"house {house} is outside 0..{SIZE - 1}")
        top = (house // BOX) * BOX
        left = (house % BOX) * BOX
        return {
            self._cells[r][c]
            for r in range(top, top + BOX)
            for c in range(left, left + BOX)
            if self._cells[r][c] != EMPTY
        }

    def peer_values(self, row: int, col: int) -> Set[int]:
        """Digits held by the other cells of the row, column and box of ``(row, col)``."""

        _check_coord(row, col)
        cells = self._cells
        values = {cells[row][c] for c in range(SIZE) if c != col}
        values.update(cells[r][col] for r in range(SIZE) if r != row)
        top, left = (row // BOX) * BOX, (col // BOX) * BOX
        values.update(
            cells[r][c]
            for r in range(top, top + BOX)
            for c in range(left, left + BOX)
            if r != row or c != col
        )
        values.discard(EMPTY)
        return values

    def cells(self) -> Iterator[tuple[Coord, int]]:
        for r, row in enumerate(self._cells):
            for c, value in enumerate(row):
                yield Coord(r, c), value

    def rows(self) -> List[List[int]]:
        return [row[:] for row in self._cells]

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone._cells = self.rows()
        return clone

    def to_string(self) -> str:
        return "".join(str(v) if v != EMPTY else "." for row in self._cells for v in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.to_string()!r})"


__all__ = [
    "BOX",
    "DIGITS",
    "EMPTY",
    "SIZE",
    "Coord",
    "CoordinateError",
    "Grid",
    "house_index",
]
