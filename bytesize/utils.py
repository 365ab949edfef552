"""
Integer helpers for bytesize.

Exact arithmetic on unsigned 64-bit byte counts.
"""
from __future__ import annotations

from bytesize.constants import MAX_BYTES


def wrap(n: int) -> int:
    """Reduce an integer modulo 2**64, like unsigned 64-bit overflow.
    
    Examples:
        >>> wrap(2 ** 64 + 5)
        5
        >>> wrap(-1) == 2 ** 64 - 1
        True
    """
    return n & MAX_BYTES


def round_up(value: int, unit: int) -> int:
    """Smallest multiple of unit that is >= value.
    
    Args:
        value: Byte count
        unit: Granularity in bytes; must not be zero
        
    Returns:
        value unchanged if it is already a multiple, otherwise the next
        multiple of unit (wrapped to 64 bits)
        
    Raises:
        ZeroDivisionError: If unit is zero
    """
    remainder = value % unit
    if remainder == 0:
        return value
    return wrap(value - remainder + unit)


def truncate(value: int, unit: int) -> int:
    """Largest multiple of unit that is <= value.
    
    Raises:
        ZeroDivisionError: If unit is zero
    """
    return value - value % unit
