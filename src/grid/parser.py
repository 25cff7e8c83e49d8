"""Text input for puzzles: nine lines of ``1``-``9`` and ``.``."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .model import EMPTY, SIZE, Grid

BLANK_CHAR = "."


class ParseGridError(ValueError):
    """Raised when puzzle text does not describe a 9x9 grid."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


def _parse_row(line: str, index: int) -> List[int]:
    if len(line) != SIZE:
        raise ParseGridError("invalid-size", f"row {index} has {len(line)} cells")
    row: List[int] = []
    for col, ch in enumerate(line):
        if ch == BLANK_CHAR:
            row.append(EMPTY)
        elif ch in "123456789":
            row.append(int(ch))
        else:
            raise ParseGridError("invalid-char", f"{ch!r} at row {index}, col {col}")
    return row


def parse_grid(text: str) -> Grid:
    """Parse ``text`` into a :class:`Grid`.

    Blank lines and whitespace around each row are ignored.  Anything other
    than exactly nine rows of nine digit-or-dot characters is rejected.
    """

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) != SIZE:
        raise ParseGridError("invalid-size", f"expected {SIZE} rows, got {len(lines)}")
    return Grid([_parse_row(line, index) for index, line in enumerate(lines)])


def load_grid(path: str | Path) -> Grid:
    return parse_grid(Path(path).read_text("utf-8"))


__all__ = ["BLANK_CHAR", "ParseGridError", "load_grid", "parse_grid"]
