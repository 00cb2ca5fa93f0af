"""Pattern file formats: Life 1.05, Life 1.06 and RLE."""

import itertools
import logging
from typing import TextIO, Union
from os import PathLike

from ..core.config import DEFAULT_CONFIG, GridConfig
from ..core.grid import Grid
from . import life105, life106, rle
from .errors import EmptyInputError, FileOpenError, PatternError, UnknownFormatError

_logger = logging.getLogger(__name__)

LIFE_PREFIX = "#Life 1.0"


def parse_life(filename: Union[str, PathLike], config: GridConfig = DEFAULT_CONFIG) -> Grid:
    """Read a pattern file into a full grid.

    The file is closed whether or not decoding succeeds.

    Args:
        filename: Path to a Life 1.05, Life 1.06 or RLE file
        config: Grid dimensions

    Returns:
        The initial generation

    Raises:
        FileOpenError: If the file cannot be opened
        PatternError: If the file is empty, of unknown format or invalid
    """
    try:
        # newline="" keeps '\r\n' terminators so line lengths are exact
        stream = open(filename, "r", newline="")
    except OSError as e:
        raise FileOpenError(f"could not open input file {filename}: {e.strerror or e}") from e

    with stream:
        try:
            return parse_stream(stream, config)
        except UnicodeDecodeError as e:
            raise FileOpenError(f"could not read input file {filename}: {e}") from e


def parse_stream(stream: TextIO, config: GridConfig = DEFAULT_CONFIG) -> Grid:
    """Detect the format from the first line of a text stream and decode it.

    Lines starting with '#Life 1.05' and '#Life 1.06' select the Life
    decoders; any other '#Life 1.0' version is rejected. Anything else is
    read as RLE.

    Raises:
        EmptyInputError: If the stream has no lines
        UnknownFormatError: If the Life version is not 1.05 or 1.06
        PatternError: Any error raised by the selected decoder
    """
    first_line = stream.readline()
    if first_line == "":
        raise EmptyInputError("input contains no data")

    if first_line.startswith(LIFE_PREFIX):
        version = first_line[len(LIFE_PREFIX) : len(LIFE_PREFIX) + 1]
        if version == "5":
            _logger.debug("Detected Life 1.05 format")
            return life105.decode(stream, config)
        if version == "6":
            _logger.debug("Detected Life 1.06 format")
            return life106.decode(stream, config)
        raise UnknownFormatError(f"unknown file format {first_line.rstrip()!r}", 1)

    _logger.debug("No Life header, assuming RLE format")
    return rle.decode(itertools.chain([first_line], stream), config)


__all__ = ["parse_life", "parse_stream", "PatternError", "life105", "life106", "rle"]
