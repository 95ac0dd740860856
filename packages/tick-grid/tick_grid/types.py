"""Shared types for tick-grid."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Coord(NamedTuple):
    x: int
    y: int


class CellType(Enum):
    INVALID = "invalid"
    SOLID = "solid"
    EMPTY = "empty"
    OPEN = "open"
    CLOSED = "closed"
    CURRENT = "current"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Cell:
    """A grid position and its type tag."""

    coord: Coord
    type: CellType


class GridError(ValueError):
    """Raised on malformed grid input or a missing start/end marker."""
