from __future__ import annotations

"""
Handler Factories.

Every handler ponybuild installs carries a marker attribute, so
reconfiguration only removes its own handlers and leaves pytest's or a host
application's alone.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ponybuild.infra.fs import ensure_parent_dir

# Marker attribute set on every ponybuild handler
_HANDLER_TAG_ATTR: str = "_ponybuild_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by ponybuild."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries the ponybuild tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler.

    A log file that cannot be opened is reported on stderr and skipped;
    diagnostics must never prevent a build script from being generated.

    Returns:
        Optional[RotatingFileHandler]: The tagged handler, or None when the
        file cannot be opened.
    """
    try:
        ensure_parent_dir(log_file)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
