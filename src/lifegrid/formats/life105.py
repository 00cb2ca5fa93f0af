"""Life 1.05 decoder.

Only the picture part of the format is understood::

    #Life 1.05
    #D A glider
    .*.
    ..*
    ***

Blank lines and ``#D`` description lines are skipped. ``#P`` blocks and
``#N``/``#R`` rule lines are not supported and are rejected as invalid
characters. The pattern is centred on the grid.
"""

import logging
from typing import Iterable

from ..core.config import GridConfig
from ..core.grid import CellState, Grid
from ..core.patterns import RaggedPattern
from .errors import InvalidCharacterError, PatternTooTallError, PatternTooWideError
from .lines import check_line_length, is_blank, strip_terminator

_logger = logging.getLogger(__name__)

HEADER = "#Life 1.05"


def decode(lines: Iterable[str], config: GridConfig, first_line_number: int = 2) -> Grid:
    """Decode the lines following a Life 1.05 header.

    Args:
        lines: Remaining lines of the file, terminators included
        config: Grid dimensions
        first_line_number: Line number of the first item in ``lines``

    Returns:
        A full grid with the pattern centred

    Raises:
        LineTooLongError: If a line is longer than the line limit
        PatternTooWideError: If a row is wider than the grid
        PatternTooTallError: If there are more rows than the grid has
        InvalidCharacterError: If a row holds anything but '.' and '*'
    """
    pattern = RaggedPattern()

    for line_number, line in enumerate(lines, first_line_number):
        check_line_length(line, line_number, config)
        if is_blank(line) or line.startswith("#D"):
            continue

        text = strip_terminator(line)
        if len(text) > config.width:
            raise PatternTooWideError(
                f"row of {len(text)} cells is wider than the {config.width}-column grid", line_number
            )
        # Fail before storing a row that has nowhere to go
        if pattern.height == config.height:
            raise PatternTooTallError(f"pattern has more than {config.height} rows", line_number)

        pattern.add_row(_decode_row(text, line_number))

    xtop, ytop = pattern.offsets(config)
    _logger.debug("Life 1.05 pattern %dx%d placed at (%d, %d)", pattern.width, pattern.height, xtop, ytop)
    return pattern.to_grid(config)


def _decode_row(text: str, line_number: int) -> list:
    row = []
    for column, char in enumerate(text, 1):
        try:
            row.append(CellState.from_glyph(char))
        except ValueError:
            raise InvalidCharacterError(
                f"unexpected character {char!r} in column {column}", line_number
            ) from None
    return row
