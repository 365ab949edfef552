"""
bytesize - Binary Byte Size Values

Parse, format, add and round byte counts expressed in binary units
(B, KB=2**10, MB=2**20, ..., EB=2**60).
"""
from __future__ import annotations

__version__ = "1.0.0"

# Re-export main components for convenient imports
from bytesize.constants import (
    B,
    KB,
    MB,
    GB,
    TB,
    PB,
    EB,
    MAX_BYTES,
    UNITS,
    Unit,
    lookup_unit,
)
from bytesize.errors import (
    ByteSizeError,
    ByteSizeParseError,
    ByteSizeOverflowError,
    ByteSizeValueError,
    UnrecognizedUnitError,
)
from bytesize.config import (
    FormatSettings,
    settings,
    configure,
    reset,
    overrides,
)
from bytesize.formatting import format_size, human_size
from bytesize.parsing import parse_bytes, try_parse_bytes
from bytesize.models import ByteSize, new, parse

__all__ = [
    # Version info
    "__version__",
    # Units
    "B",
    "KB",
    "MB",
    "GB",
    "TB",
    "PB",
    "EB",
    "MAX_BYTES",
    "UNITS",
    "Unit",
    "lookup_unit",
    # Errors
    "ByteSizeError",
    "ByteSizeParseError",
    "ByteSizeOverflowError",
    "ByteSizeValueError",
    "UnrecognizedUnitError",
    # Configuration
    "FormatSettings",
    "settings",
    "configure",
    "reset",
    "overrides",
    # Formatting and parsing
    "format_size",
    "human_size",
    "parse_bytes",
    "try_parse_bytes",
    # Value type
    "ByteSize",
    "new",
    "parse",
]
