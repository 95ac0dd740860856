"""tick-search - Tick-driven, step-resumable grid search."""
from __future__ import annotations

from tick_search.astar import AStar
from tick_search.config import RunnerConfig
from tick_search.heuristics import coords_match, manhattan_distance, neighbours
from tick_search.registry import ALGORITHMS, make_algorithm
from tick_search.runner import SearchRunner
from tick_search.types import GridLike, Node, SearchAlgorithm, SearchDetails

__all__ = [
    "ALGORITHMS",
    "AStar",
    "GridLike",
    "Node",
    "RunnerConfig",
    "SearchAlgorithm",
    "SearchDetails",
    "SearchRunner",
    "coords_match",
    "make_algorithm",
    "manhattan_distance",
    "neighbours",
]
