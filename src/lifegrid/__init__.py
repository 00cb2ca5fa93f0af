"""Conway's Game of Life on a fixed grid, loaded from Life 1.05, Life 1.06 and RLE files."""

__version__ = "0.1.0"

from .core.config import DEFAULT_CONFIG, GridConfig
from .core.grid import CellState, Grid
from .core.game import GameOfLife
from .formats import parse_life, parse_stream
from .formats.render import render_grid

__all__ = [
    "DEFAULT_CONFIG",
    "GridConfig",
    "CellState",
    "Grid",
    "GameOfLife",
    "parse_life",
    "parse_stream",
    "render_grid",
]
