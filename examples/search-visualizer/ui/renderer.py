"""Grid, path, and sidebar rendering."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from tick_grid import CellType, Grid
from ui.constants import (
    CELL_COLORS,
    COLOR_EXHAUSTED,
    COLOR_FOUND,
    COLOR_GRID_LINE,
    COLOR_PATH,
    COLOR_SIDEBAR_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    TILE_SIZE,
)

if TYPE_CHECKING:
    from tick_search import SearchDetails


def draw_grid(surface: pygame.Surface, grid: Grid) -> None:
    """Draw every cell, then the start/end markers on top of any annotation."""
    for x in range(grid.width):
        for y in range(grid.height):
            cell = grid.cell_at(x, y)
            rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
            pygame.draw.rect(surface, CELL_COLORS[cell.type], rect)

    for coord, marker in ((grid.start_coord(), CellType.START), (grid.end_coord(), CellType.END)):
        color = CELL_COLORS[marker]
        rect = pygame.Rect(coord[0] * TILE_SIZE, coord[1] * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, color, rect.inflate(-8, -8))

    w, h = grid.width * TILE_SIZE, grid.height * TILE_SIZE
    for x in range(grid.width + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (x * TILE_SIZE, 0), (x * TILE_SIZE, h))
    for y in range(grid.height + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, y * TILE_SIZE), (w, y * TILE_SIZE))


def draw_path(surface: pygame.Surface, details: SearchDetails | None) -> None:
    if details is None or details.path is None or len(details.path) < 2:
        return
    half = TILE_SIZE // 2
    points = [(x * TILE_SIZE + half, y * TILE_SIZE + half) for x, y in details.path]
    pygame.draw.lines(surface, COLOR_PATH, False, points, 3)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    x0: int,
    lines: list[tuple[str, tuple[int, int, int]]],
) -> None:
    h = surface.get_height()
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x0, 0, surface.get_width() - x0, h))
    pygame.draw.line(surface, (50, 50, 60), (x0, 0), (x0, h))
    y = 8
    for text, color in lines:
        surface.blit(font.render(text, True, color), (x0 + 8, y))
        y += 18


def sidebar_lines(
    algorithm: str,
    map_name: str,
    tps: int,
    playing: bool,
    details: SearchDetails | None,
) -> list[tuple[str, tuple[int, int, int]]]:
    """Format the latest snapshot for the sidebar."""
    lines = [
        (f"{algorithm} on '{map_name}'", COLOR_TEXT),
        (f"{'Playing' if playing else 'Paused'} @ {tps} tps", COLOR_TEXT_DIM),
        ("", COLOR_TEXT),
    ]
    if details is None:
        lines.append(("Press SPACE or N", COLOR_TEXT_DIM))
        return lines

    current = details.current.coord if details.current is not None else "-"
    lines += [
        (f"Operations: {details.operations}", COLOR_TEXT),
        (f"Current:    {current}", COLOR_TEXT),
        (f"Distance:   {details.distance}", COLOR_TEXT),
        (f"Frontier:   {details.frontier_size}", COLOR_TEXT),
        (f"Visited:    {details.visited_size}", COLOR_TEXT),
        (f"Unexplored: {details.unexplored}", COLOR_TEXT),
        ("", COLOR_TEXT),
    ]
    if details.found:
        lines.append((f"Path: {len(details.path) - 1} steps", COLOR_FOUND))
    elif details.exhausted:
        lines.append(("No path", COLOR_EXHAUSTED))
    return lines
