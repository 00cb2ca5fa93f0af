"""Life 1.06 decoder.

Each line after the header gives the coordinates of one living cell::

    #Life 1.06
    1 0
    2 1
    0 2

Coordinates are absolute grid positions; the pattern is not centred.
"""

import logging
import re
from typing import Iterable

from ..core.config import GridConfig
from ..core.grid import CellState, Grid
from .errors import MalformedCoordinateLineError, PatternTooLargeError
from .lines import strip_terminator

_logger = logging.getLogger(__name__)

HEADER = "#Life 1.06"

COORDINATES = re.compile(r"^\s*([+-]?\d+)\s+([+-]?\d+)")


def decode(lines: Iterable[str], config: GridConfig, first_line_number: int = 2) -> Grid:
    """Decode the lines following a Life 1.06 header.

    Anything after the two integers on a line is ignored.

    Args:
        lines: Remaining lines of the file
        config: Grid dimensions
        first_line_number: Line number of the first item in ``lines``

    Returns:
        A full grid with the listed cells alive

    Raises:
        MalformedCoordinateLineError: If a line does not start with two integers
        PatternTooLargeError: If a coordinate lies outside the grid
    """
    grid = Grid.from_config(config)

    for line_number, line in enumerate(lines, first_line_number):
        match = COORDINATES.match(line)
        if match is None:
            raise MalformedCoordinateLineError(
                f"expected '<x> <y>', got {strip_terminator(line)!r}", line_number
            )

        x, y = int(match.group(1)), int(match.group(2))
        if not (0 <= x < config.width and 0 <= y < config.height):
            raise PatternTooLargeError(
                f"cell ({x}, {y}) is outside the {config.width}x{config.height} grid", line_number
            )
        grid.set_cell(x, y, CellState.LIVE)

    _logger.debug("Life 1.06 pattern with %d live cells", grid.population)
    return grid
