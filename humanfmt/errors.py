"""
Parse errors raised by parse_bytes() and parse_si().

All parse errors derive from ParseError, a ValueError, and carry a `kind` tag so that
callers can branch on the failure without matching exception classes:

    >>> try:
    ...     parse_bytes("42 furlongs")
    ... except ParseError as exc:
    ...     exc.kind
    <ParseErrorKind.INVALID_FORMAT: 'invalid_format'>
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ParseErrorKind(StrEnum):
    """
    Named parse failures.

    Attributes:
        INVALID_FORMAT (str) : No numeric literal found, or the unit suffix is not recognized
        OVERFLOW (str)       : Parsed byte count is negative or exceeds the unsigned 64-bit range
    """
    INVALID_FORMAT = "invalid_format"
    OVERFLOW = "overflow"


class ParseError(ValueError):
    """Base class for parse failures; `text` is the input that failed to parse."""

    kind: ParseErrorKind

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class InvalidFormatError(ParseError):
    kind = ParseErrorKind.INVALID_FORMAT


class ParseOverflowError(ParseError, OverflowError):
    kind = ParseErrorKind.OVERFLOW
