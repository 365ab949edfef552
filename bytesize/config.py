"""
Process-wide formatting defaults for bytesize.

str(ByteSize) reads `settings` on every call. Nothing here is synchronized:
set the defaults during application start-up, before worker threads exist,
or pass an explicit format to ByteSize.format() / format_size() instead.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from bytesize.logging import logger


DEFAULT_FORMAT = '%.2f'
LONG_UNITS = False


@dataclass
class FormatSettings:
    """Defaults used when a ByteSize is rendered with str().
    
    Attributes:
        default_format: printf-style float template for the number, without
            a unit separator (e.g., "%.2f" -> "1.00KB", "%.0f " -> "1 KB")
        long_units: Emit "kilobytes" instead of "KB"
    """
    default_format: str = DEFAULT_FORMAT
    long_units: bool = LONG_UNITS


# Module-level settings instance
settings = FormatSettings()


def configure(
    default_format: Optional[str] = None,
    long_units: Optional[bool] = None,
) -> FormatSettings:
    """Update the process-wide defaults.
    
    Args:
        default_format: New numeric template, or None to keep the current one
        long_units: New long-unit mode, or None to keep the current one
        
    Returns:
        The updated settings object
    """
    if default_format is not None:
        settings.default_format = default_format
    if long_units is not None:
        settings.long_units = bool(long_units)
    logger.info(
        f'Formatting defaults: format={settings.default_format!r} '
        f'long_units={settings.long_units}'
    )
    return settings


def reset() -> FormatSettings:
    """Restore the initial defaults ("%.2f", short units)."""
    return configure(default_format=DEFAULT_FORMAT, long_units=LONG_UNITS)


@contextmanager
def overrides(
    default_format: Optional[str] = None,
    long_units: Optional[bool] = None,
) -> Iterator[FormatSettings]:
    """Temporarily change the defaults, restoring the previous ones on exit.
    
    Examples:
        >>> from bytesize import ByteSize
        >>> with overrides('%.0f ', long_units=True):
        ...     str(ByteSize(2048))
        '2 kilobytes'
    """
    saved = replace(settings)
    configure(default_format, long_units)
    try:
        yield settings
    finally:
        configure(saved.default_format, saved.long_units)
