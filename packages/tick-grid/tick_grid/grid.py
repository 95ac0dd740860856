"""Grid - bounded 2D cell-type storage with start/end markers."""
from __future__ import annotations

from tick_grid.types import Cell, CellType, Coord, GridError

_CHAR_TO_TYPE: dict[str, CellType] = {
    ".": CellType.EMPTY,
    "#": CellType.SOLID,
    "S": CellType.START,
    "E": CellType.END,
    "o": CellType.OPEN,
    "x": CellType.CLOSED,
    "*": CellType.CURRENT,
}
_TYPE_TO_CHAR = {t: c for c, t in _CHAR_TO_TYPE.items()}

_ANNOTATIONS = frozenset({CellType.OPEN, CellType.CLOSED, CellType.CURRENT})


class Grid:
    """Maps in-bounds coordinates to cell types.

    Sparse storage: only non-EMPTY cells are stored. Out-of-bounds lookups
    return an INVALID cell instead of raising, so neighbour scans at the
    edges need no special casing.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise GridError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: dict[Coord, CellType] = {}
        self._start: Coord | None = None
        self._end: Coord | None = None

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid"
            )

    # --- Queries ---

    def cell_at(self, x: int, y: int) -> Cell:
        coord = Coord(x, y)
        if not self.in_bounds(x, y):
            return Cell(coord, CellType.INVALID)
        return Cell(coord, self._cells.get(coord, CellType.EMPTY))

    def start_coord(self) -> Coord:
        if self._start is None:
            raise GridError("Grid has no start cell")
        return self._start

    def end_coord(self) -> Coord:
        if self._end is None:
            raise GridError("Grid has no end cell")
        return self._end

    def count_of_type(self, cell_type: CellType) -> int:
        if cell_type is CellType.INVALID:
            return 0
        if cell_type is CellType.EMPTY:
            return self._width * self._height - len(self._cells)
        return sum(1 for t in self._cells.values() if t is cell_type)

    # --- Mutation ---

    def set_cell_type(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the type at a coordinate.

        Painting START or END moves that marker; the cell it left reverts
        to EMPTY. Any other type painted over a marker is an annotation only
        and leaves the recorded start/end coordinate unchanged.
        """
        self._check_bounds(x, y)
        if cell_type is CellType.INVALID:
            raise ValueError("INVALID is reserved for out-of-bounds cells")
        coord = Coord(x, y)

        if cell_type is CellType.START:
            if self._start is not None and self._start != coord:
                self._cells.pop(self._start, None)
            if self._end == coord:
                self._end = None
            self._start = coord
        elif cell_type is CellType.END:
            if self._end is not None and self._end != coord:
                self._cells.pop(self._end, None)
            if self._start == coord:
                self._start = None
            self._end = coord
        elif cell_type is CellType.SOLID or cell_type is CellType.EMPTY:
            # A wall or eraser removes the marker outright.
            if self._start == coord:
                self._start = None
            if self._end == coord:
                self._end = None

        if cell_type is CellType.EMPTY:
            self._cells.pop(coord, None)
        else:
            self._cells[coord] = cell_type

    def fill_rect(
        self,
        corner1: tuple[int, int],
        corner2: tuple[int, int],
        cell_type: CellType,
    ) -> None:
        """Fill a rectangle (inclusive) with a cell type."""
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                self.set_cell_type(x, y, cell_type)

    def clear_annotations(self) -> None:
        """Drop OPEN/CLOSED/CURRENT marks left by a search and restore markers."""
        for coord in [c for c, t in self._cells.items() if t in _ANNOTATIONS]:
            del self._cells[coord]
        if self._start is not None:
            self._cells[self._start] = CellType.START
        if self._end is not None:
            self._cells[self._end] = CellType.END

    # --- Text form ---

    @classmethod
    def from_rows(cls, rows: list[str]) -> Grid:
        """Build a grid from text rows.

        ``.`` empty, ``#`` solid, ``S`` start, ``E`` end. Exactly one start
        and one end are required.
        """
        if not rows:
            raise GridError("Grid needs at least one row")
        width = len(rows[0])
        grid = cls(width, len(rows))
        starts = ends = 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridError(
                    f"Row {y} has length {len(row)}, expected {width}"
                )
            for x, ch in enumerate(row):
                cell_type = _CHAR_TO_TYPE.get(ch)
                if cell_type is None:
                    raise GridError(f"Unknown cell character {ch!r} at ({x}, {y})")
                if cell_type is CellType.START:
                    starts += 1
                elif cell_type is CellType.END:
                    ends += 1
                if cell_type is not CellType.EMPTY:
                    grid.set_cell_type(x, y, cell_type)
        if starts != 1 or ends != 1:
            raise GridError(
                f"Grid needs exactly one S and one E, got {starts} and {ends}"
            )
        return grid

    def to_rows(self) -> list[str]:
        return [
            "".join(
                _TYPE_TO_CHAR[self._cells.get(Coord(x, y), CellType.EMPTY)]
                for x in range(self._width)
            )
            for y in range(self._height)
        ]
