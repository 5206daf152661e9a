from __future__ import annotations

"""
Logging Configuration Models.

Settings accepted by configure_logging and the level names it understands.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one configure_logging call.

    Attributes:
        level: Level name; unknown names fall back to INFO.
        console: Log to stderr.
        log_file: Also log to this file, rotated by size.
        max_bytes: Rotation threshold.
        backup_count: Rotated files kept.
        console_fmt: stderr record format.
        file_fmt: Log file record format.
        datefmt: Timestamp format for the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
