"""Console renderings of a grid."""

from __future__ import annotations

from typing import List

from .model import BOX, EMPTY, SIZE, Grid

_BORDER = "+-------+-------+-------+"


def _cell(value: int) -> str:
    return str(value) if value != EMPTY else "."


def render_plain(grid: Grid) -> str:
    """Nine lines of digits and dots, each newline-terminated."""

    return "".join("".join(_cell(v) for v in row) + "\n" for row in grid.rows())


def render_boxed(grid: Grid) -> str:
    lines: List[str] = []
    for r, row in enumerate(grid.rows()):
        if r % BOX == 0:
            lines.append(_BORDER)
        parts: List[str] = []
        for c, value in enumerate(row):
            parts.append(_cell(value))
            if c % BOX == BOX - 1 and c != SIZE - 1:
                parts.append("|")
        lines.append("| " + " ".join(parts) + " |")
    lines.append(_BORDER)
    return "\n".join(lines) + "\n"


__all__ = ["render_boxed", "render_plain"]
