"""Tests for the RaggedPattern and Pattern classes."""

import pytest
from lifegrid.core.config import GridConfig
from lifegrid.core.grid import CellState, Grid
from lifegrid.core.patterns import Pattern, RaggedPattern

L = CellState.LIVE
D = CellState.DEAD


class TestRaggedPattern:
    """Test cases for the RaggedPattern class."""

    def test_empty(self):
        """Test an empty pattern."""
        pattern = RaggedPattern()
        assert pattern.width == 0
        assert pattern.height == 0

    def test_tracks_widest_row(self):
        """Test width follows the longest row."""
        pattern = RaggedPattern()
        pattern.add_row([L])
        pattern.add_row([D, D, L])
        pattern.add_row([L, L])

        assert pattern.width == 3
        assert pattern.height == 3

    def test_offsets(self):
        """Test centring offsets."""
        pattern = RaggedPattern()
        pattern.add_row([L, L, L])
        assert pattern.offsets(GridConfig(width=10, height=6)) == (3, 2)

    def test_to_grid_centres_and_pads(self):
        """Test ragged rows are centred and padded with dead cells."""
        pattern = RaggedPattern()
        pattern.add_row([L])
        pattern.add_row([D, L, L])

        grid = pattern.to_grid(GridConfig(width=7, height=4))

        assert str(grid) == "\n".join([".......", "..*....", "...**..", "......."])

    def test_to_grid_empty(self):
        """Test an empty pattern gives an all-dead grid."""
        grid = RaggedPattern().to_grid(GridConfig(width=4, height=3))
        assert grid == Grid(4, 3)

    def test_to_grid_too_large(self):
        """Test a pattern bigger than the grid is rejected."""
        pattern = RaggedPattern()
        pattern.add_row([L] * 5)
        with pytest.raises(ValueError):
            pattern.to_grid(GridConfig(width=4, height=3))


class TestPattern:
    """Test cases for the Pattern class."""

    def test_bounding_box_and_size(self):
        """Test bounding box and size."""
        pattern = Pattern([(3, 2), (5, 4), (4, 6)])
        assert pattern.get_bounding_box() == (3, 2, 5, 6)
        assert pattern.get_size() == (3, 5)

    def test_empty(self):
        """Test an empty pattern."""
        pattern = Pattern([])
        assert pattern.get_size() == (0, 0)
        assert pattern.rows() == []
        assert pattern.normalize() == pattern

    def test_normalize(self):
        """Test normalizing moves the pattern to the origin in row-major order."""
        pattern = Pattern([(7, 4), (5, 3), (6, 3)])
        assert pattern.normalize().cells == [(0, 0), (1, 0), (2, 1)]

    def test_rows(self):
        """Test rows cover the bounding box."""
        pattern = Pattern([(11, 10), (10, 11)])
        assert pattern.rows() == [[D, L], [L, D]]

    def test_from_grid(self):
        """Test building a pattern from a grid."""
        grid = Grid.from_rows(["....", ".*..", "...*"])
        assert Pattern.from_grid(grid).cells == [(1, 1), (3, 2)]

    def test_equality_ignores_order(self):
        """Test equality compares the cell sets."""
        assert Pattern([(0, 0), (1, 1)]) == Pattern([(1, 1), (0, 0)])
        assert Pattern([(0, 0)]) != Pattern([(1, 1)])
