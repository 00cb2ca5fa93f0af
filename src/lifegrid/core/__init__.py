"""Core cellular automata logic."""

from .config import DEFAULT_CONFIG, GridConfig
from .grid import CellState, Grid
from .game import GameOfLife
from .patterns import Pattern, RaggedPattern

__all__ = ["DEFAULT_CONFIG", "GridConfig", "CellState", "Grid", "GameOfLife", "Pattern", "RaggedPattern"]
