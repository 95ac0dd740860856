"""Built-in maps for the visualizer."""
from __future__ import annotations

from tick_grid import Grid

MAPS: dict[str, list[str]] = {
    "open": [
        "....................",
        "....................",
        "..S.................",
        "....................",
        "....................",
        "....................",
        "....................",
        "....................",
        ".................E..",
        "....................",
    ],
    "wall": [
        "....................",
        "..........#.........",
        "..S.......#.........",
        "..........#.........",
        "..........#.........",
        "..........#.........",
        "..........#.........",
        "..........#......E..",
        "..........#.........",
        "....................",
    ],
    "maze": [
        "S.....#.............",
        "#####.#.#######.###.",
        "......#.#.....#...#.",
        ".######.#.###.###.#.",
        "........#...#...#.#.",
        "#########.#.###.#.#.",
        "..........#...#.#.#.",
        ".##########.#.#.#.#.",
        "............#.#...#E",
        "#############.#####.",
    ],
}

MAP_ORDER = ["open", "wall", "maze"]


def load_map(name: str) -> Grid:
    """Build a fresh grid for a named map. Raises KeyError if unknown."""
    if name not in MAPS:
        raise KeyError(name)
    return Grid.from_rows(MAPS[name])
