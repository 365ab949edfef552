"""
Human-readable rendering of byte counts.

Picks the largest binary unit that does not exceed the value, renders the
scaled number with a printf-style template and appends the unit spelling.
"""
from __future__ import annotations

from typing import Optional

from bytesize import config
from bytesize.constants import UNITS, Unit, lookup_unit
from bytesize.errors import UnrecognizedUnitError


def select_unit(n: int) -> Unit:
    """Largest unit whose multiplier is <= n (bytes for anything below 1 KB).
    
    Examples:
        >>> select_unit(1023).short
        'B'
        >>> select_unit(1024).short
        'KB'
        >>> select_unit(0).short
        'B'
    """
    for unit in reversed(UNITS):
        if n >= unit.multiplier:
            return unit
    return UNITS[0]


def _is_one(number: str) -> bool:
    return number.strip() == '1'


def render(n: int, fmt: str, unit: Unit, long_units: bool = False) -> str:
    """Render n in the given unit.
    
    Args:
        n: Byte count
        fmt: printf-style template applied to n / unit.multiplier. Any
            separator between number and unit belongs in the template.
        unit: Unit to express n in
        long_units: Use "kilobyte"/"kilobytes" rather than "KB"
        
    Returns:
        Rendered string, e.g. "1.50KB" or "2 kilobytes". The singular
        long name is used only when the number renders as exactly "1".
        
    Raises:
        TypeError: If fmt does not consume exactly one float
    """
    number = fmt % (n / unit.multiplier)
    if not long_units:
        return number + unit.short
    if _is_one(number):
        return number + unit.long
    return number + unit.plural


def format_size(
    n: int,
    fmt: Optional[str] = None,
    unit: Optional[str] = None,
    long_units: Optional[bool] = None,
) -> str:
    """Format a byte count, falling back to the process-wide defaults.
    
    Args:
        n: Byte count
        fmt: Numeric template; None uses config.settings.default_format
        unit: Unit spelling to force (any accepted spelling), or None to
            pick the unit automatically
        long_units: Long unit names; None uses config.settings.long_units
        
    Returns:
        Human-readable string
        
    Raises:
        UnrecognizedUnitError: If unit is not an accepted spelling
        TypeError: If fmt does not consume exactly one float
    """
    if fmt is None:
        fmt = config.settings.default_format
    if long_units is None:
        long_units = config.settings.long_units
    
    if unit is not None:
        target = lookup_unit(unit)
        if target is None:
            raise UnrecognizedUnitError(unit)
    else:
        target = select_unit(n)
    
    return render(n, fmt, target, long_units)


def human_size(n: int) -> str:
    """Format a byte count using the current defaults.
    
    Examples:
        >>> human_size(1536)
        '1.50KB'
        >>> human_size(1073741824)
        '1.00GB'
    """
    return format_size(n)
