"""Run-length encoded (RLE) pattern decoder.

A minimal RLE reader::

    #N Glider
    x = 3, y = 3, rule = B3/S23
    bob$2bo$3o!

``#`` lines are comments and their directives are ignored, as are any fields
after ``x`` and ``y`` on the dimension line. The pattern is centred on the
grid using the declared dimensions.
"""

import logging
import re
from typing import Iterable, Optional

from ..core.config import GridConfig
from ..core.grid import CellState, Grid
from .errors import (
    ColumnOverflowError,
    InvalidTokenError,
    MissingDimensionsError,
    PatternTooLargeError,
    RowOverflowError,
)
from .lines import check_line_length, strip_terminator

_logger = logging.getLogger(__name__)

DIMENSIONS = re.compile(r"^x\s*=\s*([0-9]+)\s*,\s*y\s*=\s*([0-9]+)")
TOKEN = re.compile(r"(?P<space>\s+)|(?P<count>[0-9]+)?(?P<tag>[bo$])|(?P<end>!)")

TAG_STATES = {"b": CellState.DEAD, "o": CellState.LIVE}


class RLEDecoder:
    """Writes RLE runs onto a grid through a cursor.

    The cursor starts at the top-left corner of the centred pattern area.
    """

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.grid: Optional[Grid] = None
        self.pattern_width = 0
        self.pattern_height = 0
        self.xtop = 0
        self.ytop = 0
        self.curx = 0
        self.cury = 0

    @property
    def dimensioned(self) -> bool:
        """Whether the dimension line has been read."""
        return self.grid is not None

    def read_dimensions(self, line: str, line_number: int) -> None:
        """Parse the 'x = <int>, y = <int>' line and allocate the grid.

        Raises:
            MissingDimensionsError: If the line is not a dimension line
            PatternTooLargeError: If the declared pattern does not fit the grid
        """
        match = DIMENSIONS.match(line)
        if match is None:
            raise MissingDimensionsError(
                f"expected 'x = <int>, y = <int>', got {strip_terminator(line)!r}", line_number
            )

        width, height = int(match.group(1)), int(match.group(2))
        if width > self.config.width or height > self.config.height:
            raise PatternTooLargeError(
                f"pattern {width}x{height} does not fit the {self.config.width}x{self.config.height} grid",
                line_number,
            )

        self.pattern_width = width
        self.pattern_height = height
        self.xtop = (self.config.width - width) // 2
        self.ytop = (self.config.height - height) // 2
        self.curx, self.cury = self.xtop, self.ytop
        self.grid = Grid.from_config(self.config)
        _logger.debug("RLE pattern %dx%d placed at (%d, %d)", width, height, self.xtop, self.ytop)

    def feed(self, line: str, line_number: int) -> bool:
        """Process one data line.

        Returns:
            True if the line contained the '!' terminator

        Raises:
            InvalidTokenError: If the line holds an unrecognised character
            ColumnOverflowError: If a run extends past the right edge
            RowOverflowError: If the cursor leaves the declared pattern height
        """
        text = strip_terminator(line)
        pos = 0
        while pos < len(text):
            match = TOKEN.match(text, pos)
            if match is None:
                raise InvalidTokenError(f"unexpected character {text[pos]!r} in column {pos + 1}", line_number)
            pos = match.end()

            if match.group("end"):
                return True
            if match.group("tag"):
                count = int(match.group("count") or 1)
                self._apply(match.group("tag"), count, line_number)

        return False

    def _apply(self, tag: str, count: int, line_number: int) -> None:
        if count == 0:
            return

        if tag == "$":
            self.cury += count
            self.curx = self.xtop
            # One row past the end is allowed for a trailing '$'
            if self.cury > self.ytop + self.pattern_height:
                raise RowOverflowError(
                    f"row advance past the declared height of {self.pattern_height}", line_number
                )
            return

        if self.cury >= self.ytop + self.pattern_height:
            raise RowOverflowError(f"cells beyond the declared height of {self.pattern_height}", line_number)
        if self.curx + count > self.config.width:
            raise ColumnOverflowError(
                f"run of {count} at column {self.curx} passes the right edge of the grid", line_number
            )

        self.grid.cells[self.curx : self.curx + count, self.cury] = TAG_STATES[tag]
        self.curx += count


def decode(lines: Iterable[str], config: GridConfig, first_line_number: int = 1) -> Grid:
    """Decode an RLE file.

    Unlike the Life decoders this also takes the first line of the file,
    since it may already be a comment or the dimension line.

    Args:
        lines: Lines of the file, terminators included
        config: Grid dimensions
        first_line_number: Line number of the first item in ``lines``

    Returns:
        A full grid with the pattern centred

    Raises:
        LineTooLongError: If a line is longer than the line limit
        MissingDimensionsError: If data appears before a dimension line
        PatternTooLargeError: If the declared pattern does not fit the grid
        InvalidTokenError: If a data line holds an unrecognised character
        ColumnOverflowError: If a run extends past the right edge
        RowOverflowError: If rows go past the declared height
    """
    decoder = RLEDecoder(config)

    for line_number, line in enumerate(lines, first_line_number):
        check_line_length(line, line_number, config)
        if line.startswith("#"):
            continue

        if not decoder.dimensioned:
            decoder.read_dimensions(line, line_number)
        elif decoder.feed(line, line_number):
            break

    if not decoder.dimensioned:
        raise MissingDimensionsError("no 'x = <int>, y = <int>' line found")

    return decoder.grid
