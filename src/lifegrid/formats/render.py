"""Turning grids back into text.

``render_grid`` prints the whole grid with the same glyphs the decoders read.
The encoders write the live cells in one of the input formats so a result
can be fed back in.
"""

from typing import Callable, Dict, List

from ..core.grid import CellState, Grid
from ..core.patterns import Pattern
from . import life105, life106

RLE_LINE_LENGTH = 70


def render_grid(grid: Grid) -> str:
    """Render every cell, one newline-terminated line per row."""
    return str(grid) + "\n"


def encode_life105(grid: Grid) -> str:
    """Encode the bounding box of the live cells as a Life 1.05 picture."""
    pattern = Pattern.from_grid(grid)
    lines = [life105.HEADER]
    for row in pattern.rows():
        lines.append("".join(state.glyph for state in row))
    return "\n".join(lines) + "\n"


def encode_life106(grid: Grid) -> str:
    """Encode the live cells as Life 1.06 coordinates, in row-major order."""
    lines = [life106.HEADER]
    lines.extend(f"{x} {y}" for x, y in grid.live_cells())
    return "\n".join(lines) + "\n"


def encode_rle(grid: Grid) -> str:
    """Encode the bounding box of the live cells as RLE.

    Trailing dead cells of a row are dropped and runs of empty rows are
    written as a single counted '$'.
    """
    pattern = Pattern.from_grid(grid)
    width, height = pattern.get_size()

    tokens: List[str] = []
    gap = 0
    for index, row in enumerate(pattern.rows()):
        if index > 0:
            gap += 1
        runs = _runs(row)
        if not runs:
            continue
        if gap:
            tokens.append(_token(gap, "$"))
            gap = 0
        tokens.extend(_token(count, tag) for count, tag in runs)
    tokens.append("!")

    lines = [f"x = {width}, y = {height}, rule = B3/S23"]
    current = ""
    for token in tokens:
        if len(current) + len(token) > RLE_LINE_LENGTH:
            lines.append(current)
            current = ""
        current += token
    lines.append(current)
    return "\n".join(lines) + "\n"


def _runs(row: List[CellState]) -> List[tuple]:
    runs = []
    for state in row:
        tag = "o" if state is CellState.LIVE else "b"
        if runs and runs[-1][1] == tag:
            runs[-1] = (runs[-1][0] + 1, tag)
        else:
            runs.append((1, tag))
    if runs and runs[-1][1] == "b":
        runs.pop()
    return runs


def _token(count: int, tag: str) -> str:
    return f"{count}{tag}" if count > 1 else tag


ENCODERS: Dict[str, Callable[[Grid], str]] = {
    "text": render_grid,
    "life105": encode_life105,
    "life106": encode_life106,
    "rle": encode_rle,
}
