"""
Unit table for bytesize.

Defines the binary unit multipliers and every spelling accepted on input
or produced on output.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple


# --- Multipliers -------------------------------------------------------------

B = 1
KB = 1 << 10
MB = 1 << 20
GB = 1 << 30
TB = 1 << 40
PB = 1 << 50
EB = 1 << 60

# Largest count a ByteSize can hold (unsigned 64-bit)
MAX_BYTES = (1 << 64) - 1


# --- Unit Records ------------------------------------------------------------

@dataclass(frozen=True)
class Unit:
    """A binary unit and its spellings.
    
    Attributes:
        rank: Exponent k such that multiplier == 2 ** (10 * k)
        multiplier: Number of bytes in one unit
        short: Canonical short suffix (e.g., "KB")
        long: Singular long root (e.g., "kilobyte")
        aliases: Lower-case tokens accepted on input
    """
    rank: int
    multiplier: int
    short: str
    long: str
    aliases: FrozenSet[str]
    
    @property
    def plural(self) -> str:
        """Plural long name (e.g., "kilobytes")."""
        return self.long + 's'
    
    def matches(self, name: str) -> bool:
        """Check whether a spelling names this unit (case-insensitive)."""
        return name.strip().lower() in self.aliases


def _unit(rank: int, short: str, long: str) -> Unit:
    aliases = {short.lower(), long, long + 's'}
    if rank:
        # Single-letter prefix, e.g. 'k' for kilobyte
        aliases.add(short[0].lower())
    return Unit(
        rank=rank,
        multiplier=1 << (10 * rank),
        short=short,
        long=long,
        aliases=frozenset(aliases),
    )


UNITS: Tuple[Unit, ...] = (
    _unit(0, 'B', 'byte'),
    _unit(1, 'KB', 'kilobyte'),
    _unit(2, 'MB', 'megabyte'),
    _unit(3, 'GB', 'gigabyte'),
    _unit(4, 'TB', 'terabyte'),
    _unit(5, 'PB', 'petabyte'),
    _unit(6, 'EB', 'exabyte'),
)

# Every accepted lower-case spelling mapped to its unit
UNIT_ALIASES: Dict[str, Unit] = {
    alias: unit for unit in UNITS for alias in unit.aliases
}

UNITS_BY_MULTIPLIER: Dict[int, Unit] = {unit.multiplier: unit for unit in UNITS}


# --- Lookup ------------------------------------------------------------------

def lookup_unit(name: str) -> Optional[Unit]:
    """Find the unit named by a spelling.
    
    Args:
        name: Any short, long singular or long plural spelling, in any case
        
    Returns:
        The matching Unit, or None if the spelling is not recognized
        
    Examples:
        >>> lookup_unit('KB').multiplier
        1024
        >>> lookup_unit('Megabytes').short
        'MB'
        >>> lookup_unit('potato') is None
        True
    """
    return UNIT_ALIASES.get(name.strip().lower())


def unit_for_multiplier(multiplier: int) -> Optional[Unit]:
    """Find the unit whose multiplier is exactly the given byte count."""
    return UNITS_BY_MULTIPLIER.get(int(multiplier))
