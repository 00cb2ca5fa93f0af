"""Terminal control for clearing the screen before printing a grid."""

import sys
from typing import Optional, TextIO


def clear_sequence(stream: Optional[TextIO] = None) -> str:
    """Look up the clear-screen sequence for the terminal behind a stream.

    The terminfo database is queried through curses. When there is no usable
    entry (no curses, output redirected, unknown terminal) a warning is
    printed and an empty string is returned, so printing it is harmless.

    Args:
        stream: Output stream the grid will be written to (default stdout)

    Returns:
        The control sequence, or "" if none is available
    """
    stream = stream or sys.stdout
    try:
        import curses
    except ImportError:
        print("Warning: curses is not available, the screen will not be cleared", file=sys.stderr)
        return ""

    try:
        curses.setupterm(fd=stream.fileno())
        sequence = curses.tigetstr("clear")
    except (curses.error, OSError, ValueError):
        sequence = None

    if not sequence:
        print("Warning: your terminal is configured incorrectly, the screen will not be cleared", file=sys.stderr)
        return ""

    return sequence.decode("latin-1")
