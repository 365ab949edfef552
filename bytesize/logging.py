"""
Logging configuration for bytesize.

The package logs through loguru. As a library it stays silent until the
host application calls setup_logging() (or logger.enable('bytesize')).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger


# Default log directory
LOG_DIR = Path('./logs')

LOG_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}'

logger.disable('bytesize')


def setup_logging(log_dir: Optional[Path] = None, level: str = 'DEBUG') -> int:
    """Enable bytesize log records and write them to a rotating file.
    
    Args:
        log_dir: Directory for log files. Defaults to ./logs
        level: Minimum level written to the file
        
    Returns:
        The loguru handler id, usable with logger.remove()
    """
    if log_dir is None:
        log_dir = LOG_DIR
    
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'bytesize.log'
    
    logger.enable('bytesize')
    return logger.add(
        log_path,
        rotation='5 MB',
        retention='30 days',
        compression='gz',
        format=LOG_FORMAT,
        level=level,
        filter='bytesize',
    )
