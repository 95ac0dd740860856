"""Shared types and protocols for tick-search."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from tick_grid import Cell, CellType, Coord


@dataclass
class Node:
    """Search-tree entry.

    Attributes:
        id: Unique within one search, assigned in creation order.
        parent_id: Id of the node this one was reached from; None for the origin.
        coord: Grid position.
        g: Path cost from the origin.
        h: Heuristic estimate to the destination.
        f: Total priority, kept equal to ``g + h``.
    """

    id: int
    parent_id: int | None
    coord: Coord
    g: int
    h: int
    f: int = field(init=False)

    def __post_init__(self) -> None:
        self.f = self.g + self.h


@dataclass(frozen=True)
class SearchDetails:
    """Progress snapshot returned by every tick."""

    path: tuple[Coord, ...] | None
    current: Node | None
    distance: int
    frontier_size: int
    visited_size: int
    unexplored: int
    operations: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def exhausted(self) -> bool:
        return self.path is None and self.current is None and self.frontier_size == 0

    @property
    def finished(self) -> bool:
        return self.found or self.exhausted


class GridLike(Protocol):
    def cell_at(self, x: int, y: int) -> Cell: ...
    def set_cell_type(self, x: int, y: int, cell_type: CellType) -> None: ...
    def start_coord(self) -> Coord: ...
    def end_coord(self) -> Coord: ...
    def count_of_type(self, cell_type: CellType) -> int: ...


class SearchAlgorithm(Protocol):
    name: str

    def tick(self) -> SearchDetails: ...
