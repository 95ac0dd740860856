"""Neighbour generation and distance helpers shared by search strategies."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_grid import CellType, Coord

if TYPE_CHECKING:
    from tick_search.types import GridLike

# West, east, north, south. North is y - 1.
_DIRS_4 = [(-1, 0), (1, 0), (0, -1), (0, 1)]

_BLOCKED = frozenset({CellType.INVALID, CellType.SOLID})


def manhattan_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def coords_match(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def neighbours(grid: GridLike, coord: tuple[int, int]) -> list[Coord]:
    """Orthogonal neighbours of ``coord`` that are in bounds and not solid."""
    x, y = coord
    result: list[Coord] = []
    for dx, dy in _DIRS_4:
        cell = grid.cell_at(x + dx, y + dy)
        if cell.type not in _BLOCKED:
            result.append(Coord(x + dx, y + dy))
    return result
