"""Search Visualizer - step through A* one tick at a time with pygame.

Controls:
  Space       Play / Pause
  N           Single tick (while paused)
  R           Reset the search (keeps painted walls)
  1-3         Switch map
  + / -       Faster / slower
  Left-drag   Paint walls (resets the search)
  Right-drag  Erase walls (resets the search)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from game.maps import MAP_ORDER, MAPS, load_map
from tick_grid import CellType, Grid
from tick_search import ALGORITHMS, RunnerConfig, SearchRunner, make_algorithm
from ui.constants import COLOR_BG, FPS, MAX_TPS, MIN_TPS, SIDEBAR_W, TILE_SIZE
from ui.renderer import draw_grid, draw_path, draw_sidebar, sidebar_lines

logger = logging.getLogger("search_visualizer")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search Visualizer - tick-driven A* demo")
    p.add_argument("--map", choices=sorted(MAPS), default="wall", help="Starting map (default: wall)")
    p.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="astar", help="Search strategy (default: astar)")
    p.add_argument("--tps", type=int, default=20, help="Ticks per second (default: 20)")
    p.add_argument("--verbose", action="store_true", help="Log every selection at DEBUG")
    args = p.parse_args()
    args.tps = max(MIN_TPS, min(MAX_TPS, args.tps))
    return args


class SearchSession:
    """Holds the grid and the runner for the current search."""

    def __init__(self, map_name: str, algorithm: str, tps: int) -> None:
        self.algorithm = algorithm
        self.tps = tps
        self.playing = False
        self.load(map_name)

    def load(self, map_name: str) -> None:
        self.map_name = map_name
        self.grid: Grid = load_map(map_name)
        self.reset()

    def reset(self) -> None:
        self.grid.clear_annotations()
        self.runner = SearchRunner(
            make_algorithm(self.algorithm, self.grid),
            RunnerConfig(tps=self.tps),
        )
        self.playing = False

    def set_tps(self, tps: int) -> None:
        self.tps = max(MIN_TPS, min(MAX_TPS, tps))

    def paint(self, x: int, y: int, cell_type: CellType) -> None:
        if not self.grid.in_bounds(x, y):
            return
        if (x, y) in (self.grid.start_coord(), self.grid.end_coord()):
            return
        if self.grid.cell_at(x, y).type is cell_type:
            return
        self.grid.set_cell_type(x, y, cell_type)
        self.reset()

    def tick(self) -> None:
        if self.runner.finished:
            self.playing = False
            return
        self.runner.step()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    session = SearchSession(args.map, args.algorithm, args.tps)
    grid_w = session.grid.width * TILE_SIZE
    grid_h = session.grid.height * TILE_SIZE

    pygame.init()
    screen = pygame.display.set_mode((grid_w + SIDEBAR_W, grid_h))
    pygame.display.set_caption("Search Visualizer")
    font = pygame.font.SysFont("monospace", 14)
    clock = pygame.time.Clock()
    logger.info("map=%s algorithm=%s tps=%d", session.map_name, args.algorithm, session.tps)

    accumulator = 0.0
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        if session.playing:
            accumulator += dt
        else:
            accumulator = 0.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    session.playing = not session.playing and not session.runner.finished
                elif event.key == pygame.K_n and not session.playing:
                    session.tick()
                elif event.key == pygame.K_r:
                    session.reset()
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                    session.load(MAP_ORDER[event.key - pygame.K_1])
                    logger.info("switched to map %s", session.map_name)
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    session.set_tps(session.tps * 2)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    session.set_tps(session.tps // 2)

        if not session.playing:
            buttons = pygame.mouse.get_pressed()
            if buttons[0] or buttons[2]:
                mx, my = pygame.mouse.get_pos()
                cell_type = CellType.SOLID if buttons[0] else CellType.EMPTY
                session.paint(mx // TILE_SIZE, my // TILE_SIZE, cell_type)

        # --- Tick search at fixed rate ---
        tick_interval = 1.0 / session.tps
        while session.playing and accumulator >= tick_interval:
            session.tick()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_grid(screen, session.grid)
        draw_path(screen, session.runner.last)
        draw_sidebar(
            screen, font, grid_w,
            sidebar_lines(
                session.runner.algorithm.name, session.map_name,
                session.tps, session.playing, session.runner.last,
            ),
        )
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
