"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.grid import CellState, Grid
from lifegrid.core.config import GridConfig


class TestCellState:
    """Test cases for the CellState enum."""

    def test_glyphs(self):
        """Test glyphs for each state."""
        assert CellState.LIVE.glyph == "*"
        assert CellState.DEAD.glyph == "."

    def test_from_glyph(self):
        """Test mapping glyphs back to states."""
        assert CellState.from_glyph("*") is CellState.LIVE
        assert CellState.from_glyph(".") is CellState.DEAD

    def test_from_glyph_invalid(self):
        """Test other characters are rejected."""
        with pytest.raises(ValueError):
            CellState.from_glyph("o")

    def test_truthiness(self):
        """Test live cells are truthy and dead cells falsy."""
        assert CellState.LIVE
        assert not CellState.DEAD


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.population == 0

    def test_from_config(self):
        """Test grid sized from a config."""
        grid = Grid.from_config(GridConfig(width=7, height=3))
        assert grid.shape == (7, 3)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 5)

        # Initially all cells should be dead
        assert grid.get_cell(0, 0) is CellState.DEAD
        assert grid.get_cell(2, 3) is CellState.DEAD

        grid.set_cell(1, 1, CellState.LIVE)
        grid.set_cell(2, 3, CellState.LIVE)

        assert grid.get_cell(1, 1) is CellState.LIVE
        assert grid.get_cell(2, 3) is CellState.LIVE
        assert grid.get_cell(0, 0) is CellState.DEAD

        grid.set_cell(1, 1, CellState.DEAD)
        assert grid.get_cell(1, 1) is CellState.DEAD

    def test_out_of_bounds(self):
        """Test that edges do not wrap."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, CellState.LIVE)

        with pytest.raises(IndexError):
            grid.set_cell(3, 0, CellState.LIVE)

        with pytest.raises(IndexError):
            grid.get_cell(0, 3)

    def test_copy(self):
        """Test copies are independent."""
        grid = Grid(4, 4)
        grid.set_cell(1, 2, CellState.LIVE)

        duplicate = grid.copy()
        assert duplicate == grid

        duplicate.set_cell(0, 0, CellState.LIVE)
        assert grid.get_cell(0, 0) is CellState.DEAD
        assert duplicate != grid

    def test_copy_from_size_mismatch(self):
        """Test copying between grids of different sizes fails."""
        grid = Grid(4, 4)
        with pytest.raises(ValueError):
            grid.copy_from(Grid(5, 4))

    def test_live_cells_row_major(self):
        """Test live cells come out row by row."""
        grid = Grid(4, 3)
        grid.set_cell(3, 0, CellState.LIVE)
        grid.set_cell(0, 2, CellState.LIVE)
        grid.set_cell(1, 0, CellState.LIVE)

        assert list(grid.live_cells()) == [(1, 0), (3, 0), (0, 2)]

    def test_get_neighbors_interior(self):
        """Test neighbor counting away from the edges."""
        grid = Grid(5, 5)
        for x, y in [(1, 1), (2, 1), (3, 1), (1, 2)]:
            grid.set_cell(x, y, CellState.LIVE)

        assert grid.get_neighbors(2, 2) == 4
        assert grid.get_neighbors(2, 1) == 3
        assert grid.get_neighbors(4, 4) == 0

    def test_get_neighbors_hard_edge(self):
        """Test cells beyond the edge count as dead."""
        grid = Grid(3, 3)
        grid.set_cell(2, 2, CellState.LIVE)
        grid.set_cell(2, 0, CellState.LIVE)

        # No wraparound from the opposite edges
        assert grid.get_neighbors(0, 0) == 0
        assert grid.get_neighbors(1, 1) == 2

    def test_count_all_neighbors_matches_scalar(self):
        """Test vectorised counts agree with single-cell counts."""
        grid = Grid(7, 5)
        for x, y in [(0, 0), (1, 0), (6, 4), (5, 4), (3, 2), (3, 3), (2, 2), (6, 0)]:
            grid.set_cell(x, y, CellState.LIVE)

        counts = grid.count_all_neighbors()
        assert counts.shape == (7, 5)
        for x in range(7):
            for y in range(5):
                assert counts[x, y] == grid.get_neighbors(x, y)

    def test_from_rows(self):
        """Test building a grid from glyph rows."""
        grid = Grid.from_rows([".*.", "..*", "***"])
        assert grid.shape == (3, 3)
        assert grid.population == 5
        assert grid.get_cell(1, 0) is CellState.LIVE
        assert grid.get_cell(0, 0) is CellState.DEAD

    def test_from_rows_ragged(self):
        """Test ragged rows are rejected."""
        with pytest.raises(ValueError):
            Grid.from_rows(["..", "."])

    def test_bounding_box(self):
        """Test bounding box of living cells."""
        grid = Grid(10, 10)
        assert grid.get_bounding_box() is None

        grid.set_cell(2, 3, CellState.LIVE)
        grid.set_cell(5, 7, CellState.LIVE)
        grid.set_cell(4, 1, CellState.LIVE)

        assert grid.get_bounding_box() == (2, 1, 5, 7)

    def test_equality(self):
        """Test grid equality."""
        assert Grid(3, 3) == Grid(3, 3)
        assert Grid(3, 3) != Grid(3, 4)
        assert Grid(3, 3) != "not a grid"

    def test_string_representation(self):
        """Test rendering with '*' and '.'."""
        grid = Grid(3, 2)
        grid.set_cell(0, 0, CellState.LIVE)
        grid.set_cell(2, 1, CellState.LIVE)

        assert str(grid) == "*..\n..*"

    def test_cells_only_hold_states(self):
        """Test the cell array only ever holds 0 and 1."""
        grid = Grid.from_rows(["*.*", ".*."])
        assert set(np.unique(grid.cells)) <= {0, 1}
