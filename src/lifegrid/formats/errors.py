"""Errors raised while reading pattern files."""

from typing import Optional


class PatternError(ValueError):
    """Base class for pattern file errors.

    Args:
        message: Description of the problem
        line_number: 1-based line of the input where it was found, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FileOpenError(PatternError):
    """The pattern file could not be opened."""


class EmptyInputError(PatternError):
    """The input contains no data."""


class UnknownFormatError(PatternError):
    """The '#Life 1.0x' header names an unsupported version."""


class LineTooLongError(PatternError):
    """A physical line is longer than any valid line for the grid."""


class PatternTooLargeError(PatternError):
    """The pattern does not fit on the grid."""


class PatternTooWideError(PatternTooLargeError):
    """A pattern row is wider than the grid."""


class PatternTooTallError(PatternTooLargeError):
    """The pattern has more rows than the grid."""


class InvalidCharacterError(PatternError):
    """A Life 1.05 row contains something other than '.' or '*'."""


class MalformedCoordinateLineError(PatternError):
    """A Life 1.06 line does not start with two integers."""


class MissingDimensionsError(PatternError):
    """An RLE file has no 'x = <int>, y = <int>' line before its data."""


class ColumnOverflowError(PatternError):
    """An RLE run writes past the right edge of the grid."""


class RowOverflowError(PatternError):
    """An RLE row advance moves past the declared pattern height."""


class InvalidTokenError(PatternError):
    """An RLE data line contains an unrecognised character."""
