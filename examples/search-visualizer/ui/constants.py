"""Layout, color, and rendering constants."""
from __future__ import annotations

from tick_grid import CellType

TILE_SIZE = 32
SIDEBAR_W = 220
FPS = 60

MIN_TPS = 1
MAX_TPS = 240

CELL_COLORS: dict[CellType, tuple[int, int, int]] = {
    CellType.EMPTY: (40, 40, 50),
    CellType.SOLID: (110, 110, 120),
    CellType.OPEN: (60, 140, 80),
    CellType.CLOSED: (140, 70, 70),
    CellType.CURRENT: (230, 200, 60),
    CellType.START: (70, 130, 230),
    CellType.END: (220, 90, 200),
}

COLOR_BG = (20, 20, 30)
COLOR_GRID_LINE = (30, 30, 38)
COLOR_PATH = (250, 250, 250)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_FOUND = (100, 220, 100)
COLOR_EXHAUSTED = (220, 80, 80)
