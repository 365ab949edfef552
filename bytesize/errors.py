"""
Exceptions raised by bytesize.

All errors derive from ByteSizeError, which is a ValueError so callers
that only care about bad input can catch the builtin.
"""
from __future__ import annotations

from typing import Any


class ByteSizeError(ValueError):
    """Base class for bytesize errors.
    
    Attributes:
        value: The offending input
    """
    
    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ByteSizeParseError(ByteSizeError):
    """Input is not a single <number><unit> term."""


class ByteSizeOverflowError(ByteSizeError):
    """Parsed size does not fit in an unsigned 64-bit byte count."""


class UnrecognizedUnitError(ByteSizeError):
    """A unit name is not one of the accepted spellings."""
    
    def __init__(self, unit: str) -> None:
        super().__init__(f'Unrecognized unit: {unit}', unit)
        self.unit = unit


class ByteSizeValueError(ByteSizeError):
    """A number cannot be stored as a byte count (NaN, infinite, negative or too large)."""
