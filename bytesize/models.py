"""
The ByteSize value type.

A ByteSize is an unsigned 64-bit count of bytes. The unit used to show it
is chosen when it is rendered; the stored value is always plain bytes.
"""
from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from bytesize.constants import EB, GB, KB, MAX_BYTES, MB, PB, TB
from bytesize.errors import ByteSizeError, ByteSizeParseError, ByteSizeValueError, UnrecognizedUnitError
from bytesize.formatting import format_size
from bytesize.logging import logger
from bytesize.parsing import parse_bytes
from bytesize.utils import round_up, truncate, wrap


SizeLike = Union['ByteSize', int]


def _count(other: Any) -> int:
    if isinstance(other, ByteSize):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    raise TypeError(f'Expected ByteSize or int, got {type(other).__name__}')


@dataclass(order=True)
class ByteSize:
    """A quantity of bytes.
    
    Attributes:
        value: Byte count, 0 <= value <= 2**64 - 1
        
    Addition and subtraction wrap modulo 2**64 like unsigned integers, so
    ByteSize(0) - 1 is 2**64 - 1 bytes.
    
    Examples:
        >>> str(ByteSize(1536))
        '1.50KB'
        >>> ByteSize.parse('1.5GB').get()
        1610612736
    """
    value: int = 0
    
    def __post_init__(self) -> None:
        self.value = operator.index(self.value)
        if not 0 <= self.value <= MAX_BYTES:
            raise ByteSizeValueError(f'Byte count out of range: {self.value}', self.value)
    
    # --- Construction ---------------------------------------------------------
    
    @classmethod
    def new(cls, x: float) -> 'ByteSize':
        """Create a ByteSize from a (possibly fractional) byte count.
        
        The count is truncated toward zero.
        
        Raises:
            ByteSizeValueError: If x is NaN, infinite, negative or not
                below 2**64
        """
        x = float(x)
        if math.isnan(x) or math.isinf(x):
            raise ByteSizeValueError(f'Byte count must be finite, got {x}', x)
        if x < 0:
            raise ByteSizeValueError(f'Byte count must not be negative, got {x}', x)
        if x >= MAX_BYTES + 1:
            raise ByteSizeValueError(f'Byte count out of range: {x}', x)
        return cls(int(x))
    
    @classmethod
    def parse(cls, text: str) -> 'ByteSize':
        """Create a ByteSize from a string such as "1.5 GB".
        
        Raises:
            ByteSizeParseError: If the string is malformed
            ByteSizeOverflowError: If the size does not fit in 64 bits
        """
        return cls(parse_bytes(text))
    
    # --- Conversion -----------------------------------------------------------
    
    def get(self) -> int:
        """Raw byte count."""
        return self.value
    
    def set(self, text: str) -> None:
        """Replace the value with a parsed size string.
        
        On failure the value becomes zero and the error is re-raised.
        """
        try:
            self.value = parse_bytes(text)
        except ByteSizeError as e:
            self.value = 0
            logger.debug(f'Failed to set byte size from {text!r}: {e}')
            raise
    
    def bytes(self) -> float:
        return float(self.value)
    
    def kilobytes(self) -> float:
        return self.value / KB
    
    def megabytes(self) -> float:
        return self.value / MB
    
    def gigabytes(self) -> float:
        return self.value / GB
    
    def terabytes(self) -> float:
        return self.value / TB
    
    def petabytes(self) -> float:
        return self.value / PB
    
    def exabytes(self) -> float:
        return self.value / EB
    
    def __int__(self) -> int:
        return self.value
    
    def __index__(self) -> int:
        return self.value
    
    def __float__(self) -> float:
        return float(self.value)
    
    def __bool__(self) -> bool:
        return self.value != 0
    
    # --- Arithmetic -----------------------------------------------------------
    
    def __add__(self, other: Any) -> 'ByteSize':
        if not isinstance(other, (ByteSize, int)):
            return NotImplemented
        return ByteSize(wrap(self.value + _count(other)))
    
    __radd__ = __add__
    
    def __sub__(self, other: Any) -> 'ByteSize':
        if not isinstance(other, (ByteSize, int)):
            return NotImplemented
        return ByteSize(wrap(self.value - _count(other)))
    
    def __rsub__(self, other: Any) -> 'ByteSize':
        if not isinstance(other, int):
            return NotImplemented
        return ByteSize(wrap(_count(other) - self.value))
    
    def round(self, unit: SizeLike) -> 'ByteSize':
        """Round up to a multiple of unit.
        
        Args:
            unit: Granularity, normally one of the unit constants (KB, MB, ...)
            
        Returns:
            self if already a multiple, otherwise the next multiple of unit
            
        Raises:
            ZeroDivisionError: If unit is zero
            
        Examples:
            >>> ByteSize(1025).round(KB)
            ByteSize(value=2048)
        """
        return ByteSize(round_up(self.value, _count(unit)))
    
    def trunc(self, unit: SizeLike) -> 'ByteSize':
        """Round down to a multiple of unit.
        
        Examples:
            >>> ByteSize(1025).trunc(KB)
            ByteSize(value=1024)
        """
        return ByteSize(truncate(self.value, _count(unit)))
    
    # --- Rendering ------------------------------------------------------------
    
    def __str__(self) -> str:
        return format_size(self.value)
    
    def string(self) -> str:
        """Render with the process-wide defaults (see bytesize.config)."""
        return str(self)
    
    def format(self, fmt: str, unit: Optional[str] = None, long_units: bool = False) -> str:
        """Render with an explicit template and, optionally, a fixed unit.
        
        Args:
            fmt: printf-style template for the number, including any
                separator before the unit (e.g., "%.0f ")
            unit: Any accepted unit spelling, or None to pick automatically
            long_units: Use long names ("kilobytes") instead of "KB"
            
        Returns:
            Rendered string, or "Unrecognized unit: <unit>" if unit is
            not an accepted spelling
            
        Raises:
            TypeError: If fmt does not consume exactly one float
        """
        try:
            return format_size(self.value, fmt, unit, long_units)
        except UnrecognizedUnitError as e:
            logger.debug(f'Cannot format {self.value} bytes: {e}')
            return str(e)
    
    def format_strict(self, fmt: str, unit: Optional[str] = None, long_units: bool = False) -> str:
        """Like format(), but raise UnrecognizedUnitError for an unknown unit."""
        return format_size(self.value, fmt, unit, long_units)
    
    # --- Serialization --------------------------------------------------------
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'bytes': self.value,
            'human': str(self),
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ByteSize':
        """Create ByteSize from dictionary.
        
        Uses 'bytes' when present, otherwise parses 'human'.
        """
        if data.get('bytes') is not None:
            return cls(data['bytes'])
        if data.get('human') is not None:
            return cls.parse(data['human'])
        raise ByteSizeParseError("Dictionary has neither 'bytes' nor 'human'", data)


def new(x: float) -> ByteSize:
    """Create a ByteSize from a byte count, truncating toward zero."""
    return ByteSize.new(x)


def parse(text: str) -> ByteSize:
    """Parse a size string such as "1 KB" into a ByteSize."""
    return ByteSize.parse(text)
