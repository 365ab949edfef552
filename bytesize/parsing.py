"""
Parser for human-written byte sizes.

Accepts a single <number><optional whitespace><unit> term, e.g. "1KB",
" 1.5 gigabytes ", "10 m". The number is evaluated exactly, so
"0.5KB" is 512 bytes and fractions of a byte are dropped.
"""
from __future__ import annotations

import re
from decimal import Decimal, localcontext
from typing import Optional, Pattern, Tuple

from bytesize.constants import MAX_BYTES, lookup_unit
from bytesize.errors import ByteSizeOverflowError, ByteSizeParseError
from bytesize.logging import logger


# Number, then everything after it (the unit field)
SIZE_PAT: Pattern[str] = re.compile(r'^(?P<number>[0-9]+(?:\.[0-9]+)?)\s*(?P<unit>.*)$', re.S)

# Digits in MAX_BYTES; a longer integer part always overflows
_MAX_INTEGER_DIGITS = len(str(MAX_BYTES))


def _split(text: str) -> Tuple[str, str]:
    stripped = text.strip()
    match = SIZE_PAT.match(stripped)
    if not match:
        raise ByteSizeParseError(f'Invalid byte size: {text!r}', text)
    
    number, unit = match.group('number'), match.group('unit').strip()
    if not unit:
        raise ByteSizeParseError(f'Missing unit in byte size: {text!r}', text)
    return number, unit


def parse_bytes(text: str) -> int:
    """Parse a size string into a byte count.
    
    Args:
        text: Size such as "1 B", "1.5GB" or "2 kilobytes"
        
    Returns:
        Number of bytes, rounded down to a whole byte
        
    Raises:
        ByteSizeParseError: If the input is not exactly one number followed
            by a recognized unit
        ByteSizeOverflowError: If the size exceeds 2**64 - 1 bytes
        
    Examples:
        >>> parse_bytes('1.5GB')
        1610612736
        >>> parse_bytes(' 1 B ')
        1
    """
    if not isinstance(text, str):
        raise ByteSizeParseError(f'Byte size must be a string, not {type(text).__name__}', text)
    
    number, unit_name = _split(text)
    
    unit = lookup_unit(unit_name)
    if unit is None:
        raise ByteSizeParseError(f'Unrecognized size suffix {unit_name!r} in {text!r}', text)
    
    integer = number.partition('.')[0].lstrip('0')
    if len(integer) > _MAX_INTEGER_DIGITS:
        raise ByteSizeOverflowError(f'Byte size out of range: {text!r}', text)
    
    with localcontext() as ctx:
        # Enough precision for the multiplication to be exact
        ctx.prec = len(number) + _MAX_INTEGER_DIGITS
        product = Decimal(number) * unit.multiplier
    
    if product > MAX_BYTES:
        raise ByteSizeOverflowError(f'Byte size out of range: {text!r}', text)
    
    return int(product)


def try_parse_bytes(text: str) -> Optional[int]:
    """Parse a size string, returning None instead of raising.
    
    Args:
        text: Size string
        
    Returns:
        Number of bytes, or None if the input is invalid or out of range
    """
    try:
        return parse_bytes(text)
    except ByteSizeParseError as e:
        logger.debug(f'Failed to parse byte size {text!r}: {e}')
        return None
    except ByteSizeOverflowError as e:
        logger.debug(f'Byte size overflow {text!r}: {e}')
        return None
