"""Full-grid validation: every row, column and box holds 1..9 once."""

from __future__ import annotations

from typing import Iterable, List

from contracts.errors import ValidationIssue, ValidationReport, make_error
from grid.model import BOX, DIGITS, SIZE, Grid

_EXPECTED = sorted(DIGITS)


def _unit_ok(values: Iterable[int]) -> bool:
    return sorted(values) == _EXPECTED


def _house_cells(grid: Grid, house: int) -> List[int]:
    top = (house // BOX) * BOX
    left = (house % BOX) * BOX
    return [grid.get(r, c) for r in range(top, top + BOX) for c in range(left, left + BOX)]


def validate(grid: Grid) -> ValidationReport:
    """Check a finished grid and report each offending unit."""

    errors: List[ValidationIssue] = []
    for n in range(SIZE):
        if not _unit_ok(grid.get(n, c) for c in range(SIZE)):
            errors.append(make_error("row-invalid", f"row {n} does not hold 1..9 once", f"rows[{n}]"))
        if not _unit_ok(grid.get(r, n) for r in range(SIZE)):
            errors.append(make_error("col-invalid", f"column {n} does not hold 1..9 once", f"cols[{n}]"))
        if not _unit_ok(_house_cells(grid, n)):
            errors.append(make_error("house-invalid", f"house {n} does not hold 1..9 once", f"houses[{n}]"))
    return ValidationReport(ok=not errors, errors=errors)


__all__ = ["validate"]
