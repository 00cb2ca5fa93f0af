"""Grid data structure for the Game of Life."""

from enum import IntEnum
from typing import Iterator, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .config import GridConfig


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    LIVE = 1

    @property
    def glyph(self) -> str:
        """Character used for this state in pattern files and rendered output."""
        return "*" if self is CellState.LIVE else "."

    @classmethod
    def from_glyph(cls, char: str) -> "CellState":
        """Map a '.' or '*' character to a cell state.

        Raises:
            ValueError: If the character is neither glyph
        """
        if char == "*":
            return cls.LIVE
        if char == ".":
            return cls.DEAD
        raise ValueError(f"Not a cell glyph: {char!r}")


class Grid:
    """A fixed-size 2D grid of cells with hard (non-wrapping) edges.

    Cells are stored in a numpy array indexed ``[x, y]``. Every cell is
    either ``CellState.DEAD`` or ``CellState.LIVE``; a new grid is all dead.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self.width = width
        self.height = height
        self._cells = np.zeros((width, height), dtype=np.int8)

        # PyTorch tensors for convolution (reused for efficiency)
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def from_config(cls, config: GridConfig) -> "Grid":
        """Create an all-dead grid with the configured dimensions."""
        return cls(config.width, config.height)

    @property
    def cells(self) -> np.ndarray:
        """Get the cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

    def get_cell(self, x: int, y: int) -> CellState:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            The cell's state

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return CellState(int(self._cells[x, y]))

    def set_cell(self, x: int, y: int, state: CellState) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            state: New cell state

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[x, y] = CellState(state)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        duplicate = Grid(self.width, self.height)
        duplicate.copy_from(self)
        return duplicate

    def copy_from(self, other: "Grid") -> None:
        """Copy cell states from another grid.

        Args:
            other: Source grid to copy from

        Raises:
            ValueError: If grids have different dimensions
        """
        if other.shape != self.shape:
            raise ValueError(f"Grid dimensions don't match: {other.shape} vs {self.shape}")

        self._cells[:] = other._cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells == CellState.LIVE))

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        ys, xs = np.nonzero(self._cells.T)
        for y, x in zip(ys, xs):
            yield (int(x), int(y))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Cells beyond the grid edge count as dead.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx in [-1, 0, 1]:
            for dy in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    count += int(self._cells[nx, ny])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Returns:
            2D array indexed [x, y] with neighbor counts for each cell
        """
        # Grid uses (width, height) but PyTorch expects (height, width), so transpose
        self._torch_input[0, 0] = torch.from_numpy(self._cells.T.astype(np.float32))

        # Zero padding keeps the edge hard: outside cells are dead
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from equal-length rows of '.'/'*' glyphs.

        Raises:
            ValueError: If rows are ragged or contain other characters
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            for x, char in enumerate(row):
                grid._cells[x, y] = CellState.from_glyph(char)
        return grid

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living_coords = np.where(self._cells == CellState.LIVE)
        if len(living_coords[0]) == 0:
            return None

        min_x, max_x = int(living_coords[0].min()), int(living_coords[0].max())
        min_y, max_y = int(living_coords[1].min()), int(living_coords[1].max())

        return (min_x, min_y, max_x, max_y)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                row.append(CellState(int(self._cells[x, y])).glyph)
            result.append("".join(row))
        return "\n".join(result)
