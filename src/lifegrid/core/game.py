"""Conway's Game of Life implementation."""

from typing import Tuple
import numpy as np

from .grid import CellState, Grid


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The engine owns two grids of the same size. Each step reads the current
    grid and writes the next one, then the two swap roles. The grid passed
    in is copied and never modified.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a starting grid.

        Args:
            grid: The initial generation
        """
        self._buffers: Tuple[Grid, Grid] = (grid.copy(), Grid(grid.width, grid.height))
        self._current = 0
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """The current generation."""
        return self._buffers[self._current]

    @property
    def generation(self) -> int:
        """Number of steps taken so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        current = self._buffers[self._current]
        following = self._buffers[1 - self._current]

        neighbor_counts = current.count_all_neighbors()
        alive = current.cells == CellState.LIVE

        # Survival on 2 or 3, birth on exactly 3
        survives = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
        born = ~alive & (neighbor_counts == 3)

        following.cells[:] = np.where(survives | born, CellState.LIVE, CellState.DEAD)

        self._current = 1 - self._current
        self._generation += 1

    def run(self, generations: int) -> Grid:
        """Advance the simulation by a number of generations.

        Args:
            generations: Number of steps to take; zero leaves the grid unchanged

        Returns:
            A snapshot of the grid after the last step; later steps do not change it

        Raises:
            ValueError: If generations is negative or not an integer
        """
        if isinstance(generations, bool) or not isinstance(generations, (int, np.integer)):
            raise ValueError(f"Generation count must be an integer, got {generations!r}")
        if generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()

        return self.grid.copy()
