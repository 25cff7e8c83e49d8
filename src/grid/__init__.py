"""Grid representation and text I/O for the 9x9 puzzle."""

from __future__ import annotations

from .model import BOX, DIGITS, EMPTY, SIZE, Coord, CoordinateError, Grid, house_index
from .parser import ParseGridError, load_grid, parse_grid
from .printer import render_boxed, render_plain

__all__ = [
    "BOX",
    "DIGITS",
    "EMPTY",
    "SIZE",
    "Coord",
    "CoordinateError",
    "Grid",
    "ParseGridError",
    "house_index",
    "load_grid",
    "parse_grid",
    "render_boxed",
    "render_plain",
]
