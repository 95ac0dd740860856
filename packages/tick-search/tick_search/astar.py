"""AStar - A* search advanced one bounded step per tick."""
from __future__ import annotations

import dataclasses
import logging
from collections import deque
from typing import TYPE_CHECKING

from tick_grid import CellType, Coord

from tick_search.heuristics import coords_match, manhattan_distance, neighbours
from tick_search.types import Node, SearchDetails

if TYPE_CHECKING:
    from tick_search.types import GridLike

logger = logging.getLogger(__name__)


class AStar:
    """Resumable A* over a 4-connected grid.

    Each ``tick()`` either selects the cheapest frontier node and queues its
    neighbours, or examines exactly one queued neighbour. Cells are painted
    OPEN/CURRENT/CLOSED on the grid as the search goes so a driver can draw
    the state between ticks.
    """

    name = "A*"

    def __init__(self, grid: GridLike) -> None:
        self._grid = grid
        origin = Coord(*grid.start_coord())
        self._destination = Coord(*grid.end_coord())

        # Id-keyed maps keep insertion order; the coord maps index the same nodes.
        self._frontier: dict[int, Node] = {}
        self._frontier_at: dict[Coord, Node] = {}
        self._visited: dict[int, Node] = {}
        self._visited_at: dict[Coord, Node] = {}

        self._pending: deque[Coord] = deque()
        self._current: Node | None = None
        self._path: tuple[Coord, ...] | None = None
        self._exhausted = False
        self._operations = 0
        self._next_id = 1

        origin_node = self._new_node(None, origin, 0)
        self._frontier[origin_node.id] = origin_node
        self._frontier_at[origin] = origin_node

    # --- Properties ---

    @property
    def destination(self) -> Coord:
        return self._destination

    @property
    def path(self) -> tuple[Coord, ...] | None:
        return self._path

    @property
    def current(self) -> Node | None:
        return self._current

    @property
    def frontier(self) -> tuple[Node, ...]:
        return tuple(self._frontier.values())

    @property
    def visited(self) -> tuple[Node, ...]:
        return tuple(self._visited.values())

    def node_at(self, coord: tuple[int, int]) -> Node | None:
        """Return the frontier or visited node recorded for a coordinate."""
        coord = Coord(*coord)
        return self._frontier_at.get(coord) or self._visited_at.get(coord)

    # --- Tick ---

    def tick(self) -> SearchDetails:
        if self._path is not None or self._exhausted:
            return self._details()

        while True:
            if self._current is None:
                if not self._frontier:
                    self._exhausted = True
                    logger.debug(
                        "frontier exhausted after %d visited nodes, %s unreachable",
                        len(self._visited), self._destination,
                    )
                    return self._details()
                self._select()

            if self._pending:
                self._expand_next()
                return self._details()

            # Neighbour queue drained: close the node and select again.
            x, y = self._current.coord
            self._grid.set_cell_type(x, y, CellType.CLOSED)
            self._current = None

    def _select(self) -> None:
        # min() keeps the first node seen among equal F, i.e. insertion order.
        node = min(self._frontier.values(), key=lambda n: n.f)
        del self._frontier[node.id]
        del self._frontier_at[node.coord]
        self._visited[node.id] = node
        self._visited_at[node.coord] = node

        self._grid.set_cell_type(node.coord.x, node.coord.y, CellType.CLOSED)
        self._pending.extend(neighbours(self._grid, node.coord))
        self._current = node
        logger.debug("expanding node %d at %s (f=%d)", node.id, node.coord, node.f)

    def _expand_next(self) -> None:
        current = self._current
        self._grid.set_cell_type(current.coord.x, current.coord.y, CellType.CURRENT)
        neighbour = self._pending.popleft()

        if coords_match(neighbour, self._destination):
            self._path = self._trace_path(neighbour, current.id)
            logger.debug(
                "reached %s in %d steps", self._destination, len(self._path) - 1
            )
            return

        g = current.g + 1
        h = manhattan_distance(neighbour, self._destination)
        cost = g + h

        known = False
        for index in (self._frontier_at, self._visited_at):
            existing = index.get(neighbour)
            if existing is None:
                continue
            known = True
            if existing.f > cost:
                existing.g = g
                existing.f = cost
                existing.parent_id = current.id
        if known:
            return

        node = self._new_node(current.id, neighbour, g)
        self._frontier[node.id] = node
        self._frontier_at[neighbour] = node
        self._grid.set_cell_type(neighbour.x, neighbour.y, CellType.OPEN)

    def _trace_path(self, end: Coord, parent_id: int | None) -> tuple[Coord, ...]:
        path = [end]
        while parent_id is not None:
            node = self._visited[parent_id]
            path.append(node.coord)
            parent_id = node.parent_id
        path.reverse()
        return tuple(path)

    # --- Helpers ---

    def _new_node(self, parent_id: int | None, coord: Coord, g: int) -> Node:
        node = Node(
            id=self._next_id,
            parent_id=parent_id,
            coord=coord,
            g=g,
            h=manhattan_distance(coord, self._destination),
        )
        self._next_id += 1
        return node

    def _details(self) -> SearchDetails:
        current = self._current
        details = SearchDetails(
            path=self._path,
            current=dataclasses.replace(current) if current is not None else None,
            distance=(
                manhattan_distance(current.coord, self._destination)
                if current is not None else 0
            ),
            frontier_size=len(self._frontier),
            visited_size=len(self._visited),
            unexplored=self._grid.count_of_type(CellType.EMPTY),
            operations=self._operations,
        )
        self._operations += 1
        return details
