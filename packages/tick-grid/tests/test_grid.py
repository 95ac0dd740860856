"""
Test suite for Grid.

Tests cover:
- Construction and bounds
- INVALID sentinel for out-of-bounds lookups
- Painting and counting cell types
- Start/end marker relocation
- Rectangle fills
- Text rows round trip and parse errors
- Clearing search annotations
"""

import pytest
from tick_grid import Cell, CellType, Coord, Grid, GridError


class TestGridConstruction:
    """Test Grid initialization and properties."""

    def test_constructor_sets_dimensions(self):
        grid = Grid(width=20, height=15)
        assert grid.width == 20
        assert grid.height == 15

    def test_new_grid_is_all_empty(self):
        grid = Grid(4, 3)
        assert grid.count_of_type(CellType.EMPTY) == 12
        assert grid.cell_at(2, 1) == Cell(Coord(2, 1), CellType.EMPTY)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(GridError):
            Grid(width, height)


class TestGridBounds:
    """Test out-of-bounds handling."""

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 5), (99, 99)])
    def test_cell_at_out_of_bounds_is_invalid(self, x, y):
        grid = Grid(5, 5)
        cell = grid.cell_at(x, y)
        assert cell.type is CellType.INVALID
        assert cell.coord == (x, y)

    def test_set_out_of_bounds_raises(self):
        grid = Grid(5, 5)
        with pytest.raises(ValueError, match="out of bounds"):
            grid.set_cell_type(5, 0, CellType.SOLID)

    def test_invalid_is_not_paintable(self):
        grid = Grid(5, 5)
        with pytest.raises(ValueError):
            grid.set_cell_type(1, 1, CellType.INVALID)

    def test_count_invalid_is_zero(self):
        assert Grid(3, 3).count_of_type(CellType.INVALID) == 0


class TestGridPainting:
    """Test cell type mutation and counting."""

    def test_set_and_get(self):
        grid = Grid(5, 5)
        grid.set_cell_type(3, 4, CellType.SOLID)
        assert grid.cell_at(3, 4).type is CellType.SOLID

    def test_set_empty_removes_from_count(self):
        grid = Grid(3, 3)
        grid.set_cell_type(1, 1, CellType.OPEN)
        assert grid.count_of_type(CellType.EMPTY) == 8
        grid.set_cell_type(1, 1, CellType.EMPTY)
        assert grid.count_of_type(CellType.EMPTY) == 9
        assert grid.count_of_type(CellType.OPEN) == 0

    def test_count_by_type(self):
        grid = Grid(4, 4)
        grid.set_cell_type(0, 0, CellType.SOLID)
        grid.set_cell_type(1, 0, CellType.SOLID)
        grid.set_cell_type(2, 0, CellType.CLOSED)
        assert grid.count_of_type(CellType.SOLID) == 2
        assert grid.count_of_type(CellType.CLOSED) == 1
        assert grid.count_of_type(CellType.EMPTY) == 13

    def test_fill_rect_inclusive_any_corner_order(self):
        grid = Grid(5, 5)
        grid.fill_rect((3, 2), (1, 1), CellType.SOLID)
        assert grid.count_of_type(CellType.SOLID) == 6
        assert grid.cell_at(1, 1).type is CellType.SOLID
        assert grid.cell_at(3, 2).type is CellType.SOLID
        assert grid.cell_at(4, 2).type is CellType.EMPTY


class TestGridMarkers:
    """Test start/end placement."""

    def test_missing_start_and_end_raise(self):
        grid = Grid(3, 3)
        with pytest.raises(GridError):
            grid.start_coord()
        with pytest.raises(GridError):
            grid.end_coord()

    def test_markers_recorded(self):
        grid = Grid(3, 3)
        grid.set_cell_type(0, 0, CellType.START)
        grid.set_cell_type(2, 2, CellType.END)
        assert grid.start_coord() == (0, 0)
        assert grid.end_coord() == Coord(2, 2)

    def test_moving_start_clears_old_cell(self):
        grid = Grid(3, 3)
        grid.set_cell_type(0, 0, CellType.START)
        grid.set_cell_type(1, 2, CellType.START)
        assert grid.start_coord() == (1, 2)
        assert grid.cell_at(0, 0).type is CellType.EMPTY
        assert grid.count_of_type(CellType.START) == 1

    def test_annotation_over_start_keeps_marker(self):
        grid = Grid(3, 3)
        grid.set_cell_type(0, 0, CellType.START)
        grid.set_cell_type(0, 0, CellType.CLOSED)
        assert grid.cell_at(0, 0).type is CellType.CLOSED
        assert grid.start_coord() == (0, 0)

    def test_wall_over_end_removes_marker(self):
        grid = Grid(3, 3)
        grid.set_cell_type(2, 2, CellType.END)
        grid.set_cell_type(2, 2, CellType.SOLID)
        with pytest.raises(GridError):
            grid.end_coord()

    def test_start_over_end_takes_the_cell(self):
        grid = Grid(3, 3)
        grid.set_cell_type(1, 1, CellType.END)
        grid.set_cell_type(1, 1, CellType.START)
        assert grid.start_coord() == (1, 1)
        with pytest.raises(GridError):
            grid.end_coord()

    def test_clear_annotations_restores_markers(self):
        grid = Grid.from_rows(["S..", "...", "..E"])
        grid.set_cell_type(0, 0, CellType.CLOSED)
        grid.set_cell_type(1, 0, CellType.OPEN)
        grid.set_cell_type(2, 2, CellType.CURRENT)
        grid.set_cell_type(1, 1, CellType.SOLID)
        grid.clear_annotations()
        assert grid.to_rows() == ["S..", ".#.", "..E"]


class TestGridRows:
    """Test the text form."""

    def test_from_rows(self):
        grid = Grid.from_rows([
            "S.#",
            "..E",
        ])
        assert grid.width == 3
        assert grid.height == 2
        assert grid.start_coord() == (0, 0)
        assert grid.end_coord() == (2, 1)
        assert grid.cell_at(2, 0).type is CellType.SOLID
        assert grid.count_of_type(CellType.EMPTY) == 3

    def test_to_rows_round_trip(self):
        rows = ["S..#", ".#.E", "...."]
        assert Grid.from_rows(rows).to_rows() == rows

    def test_to_rows_renders_annotations(self):
        grid = Grid(3, 1)
        grid.set_cell_type(0, 0, CellType.OPEN)
        grid.set_cell_type(1, 0, CellType.CLOSED)
        grid.set_cell_type(2, 0, CellType.CURRENT)
        assert grid.to_rows() == ["ox*"]

    @pytest.mark.parametrize("rows", [
        [],
        ["S..", "..E."],
        ["S.?", "..E"],
        ["...", "..E"],
        ["S..", "..."],
        ["S.S", "..E"],
        ["S.E", "..E"],
    ])
    def test_malformed_rows_rejected(self, rows):
        with pytest.raises(GridError):
            Grid.from_rows(rows)

    def test_grid_error_is_value_error(self):
        assert issubclass(GridError, ValueError)
