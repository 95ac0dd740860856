"""Named search strategy factories."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_search.astar import AStar

if TYPE_CHECKING:
    from tick_search.types import GridLike, SearchAlgorithm

ALGORITHMS: dict[str, Callable[[GridLike], SearchAlgorithm]] = {
    "astar": AStar,
}


def make_algorithm(name: str, grid: GridLike) -> SearchAlgorithm:
    """Build the named strategy over ``grid``. Raises KeyError for unknown names."""
    factory = ALGORITHMS.get(name)
    if factory is None:
        raise KeyError(f"Unknown algorithm {name!r}, expected one of {sorted(ALGORITHMS)}")
    return factory(grid)
