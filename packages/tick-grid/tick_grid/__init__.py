"""tick-grid - Typed 2D cell grid for step-wise search."""
from __future__ import annotations

from tick_grid.grid import Grid
from tick_grid.types import Cell, CellType, Coord, GridError

__all__ = [
    "Cell",
    "CellType",
    "Coord",
    "Grid",
    "GridError",
]
