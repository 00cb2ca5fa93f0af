"""Pattern representations that sit between pattern files and grids."""

from typing import List, Tuple

from .config import GridConfig
from .grid import CellState, Grid


class RaggedPattern:
    """Rows of cells whose lengths may differ, before placement on a grid.

    The Life 1.05 decoder builds one of these row by row and converts it to a
    fixed-size grid exactly once, centred.
    """

    def __init__(self) -> None:
        self.rows: List[List[CellState]] = []
        self.width = 0

    @property
    def height(self) -> int:
        """Number of rows read so far."""
        return len(self.rows)

    def add_row(self, row: List[CellState]) -> None:
        """Append a row and widen the pattern if needed.

        Args:
            row: Cell states from left to right
        """
        self.rows.append(list(row))
        if len(row) > self.width:
            self.width = len(row)

    def offsets(self, config: GridConfig) -> Tuple[int, int]:
        """Get (xtop, ytop), the top-left corner that centres this pattern."""
        return ((config.width - self.width) // 2, (config.height - self.height) // 2)

    def to_grid(self, config: GridConfig) -> Grid:
        """Place the pattern in the middle of a new grid.

        Short rows are padded with dead cells.

        Raises:
            ValueError: If the pattern does not fit the configured grid
        """
        if self.width > config.width or self.height > config.height:
            raise ValueError(
                f"Pattern {self.width}x{self.height} does not fit grid {config.width}x{config.height}"
            )

        xtop, ytop = self.offsets(config)
        grid = Grid.from_config(config)
        for y, row in enumerate(self.rows):
            for x, state in enumerate(row):
                grid.set_cell(xtop + x, ytop + y, state)
        return grid


class Pattern:
    """The set of living cells of a grid, as (x, y) coordinates."""

    def __init__(self, cells: List[Tuple[int, int]]) -> None:
        """Initialize a pattern.

        Args:
            cells: List of (x, y) coordinates for living cells
        """
        self.cells = cells

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height); (0, 0) when empty."""
        if not self.cells:
            return (0, 0)
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0).

        Cells are sorted in row-major order.
        """
        if not self.cells:
            return Pattern([])

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = sorted(((x - min_x, y - min_y) for x, y in self.cells), key=lambda c: (c[1], c[0]))
        return Pattern(normalized_cells)

    def rows(self) -> List[List[CellState]]:
        """Get the normalized pattern as rows of cell states covering its bounding box."""
        width, height = self.get_size()
        rows = [[CellState.DEAD] * width for _ in range(height)]
        for x, y in self.normalize().cells:
            rows[y][x] = CellState.LIVE
        return rows

    @classmethod
    def from_grid(cls, grid: Grid) -> "Pattern":
        """Create pattern from current grid state."""
        return cls(list(grid.live_cells()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return False
        return sorted(self.cells) == sorted(other.cells)

    def __repr__(self) -> str:
        return f"Pattern({self.cells!r})"
