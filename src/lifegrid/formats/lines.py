"""Physical line handling shared by the pattern decoders."""

from ..core.config import GridConfig
from .errors import LineTooLongError

TERMINATORS = "\r\n"


def check_line_length(line: str, line_number: int, config: GridConfig) -> None:
    """Reject lines that could not have been read whole into a line buffer.

    A valid line holds at most ``config.max_line - 1`` characters including
    its terminator; a line of exactly that length must end in a newline.

    Raises:
        LineTooLongError: If the line is too long
    """
    limit = config.max_line - 1
    if len(line) > limit or (len(line) == limit and not line.endswith("\n")):
        raise LineTooLongError(f"line longer than {limit} characters", line_number)


def strip_terminator(line: str) -> str:
    """Remove trailing '\\r' and '\\n' characters."""
    return line.rstrip(TERMINATORS)


def is_blank(line: str) -> bool:
    """True for a line holding nothing but its terminator."""
    return line == "" or line[0] in TERMINATORS
