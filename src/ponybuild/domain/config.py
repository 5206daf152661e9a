from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration and its JSON persistence. The
stored document is versioned; unknown keys are ignored on load and missing
keys fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from ponybuild.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_AR,
    DEFAULT_BINARY_SUFFIX,
    DEFAULT_BUILDDIR,
    DEFAULT_CC,
    DEFAULT_CFLAGS,
    DEFAULT_LDFLAGS,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_SCRIPT_NAME,
)
from ponybuild.infra.fs import ensure_parent_dir, get_config_file_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "manifest_path": DEFAULT_MANIFEST_NAME,
        "output_path": DEFAULT_SCRIPT_NAME,

        # Toolchain
        "builddir": DEFAULT_BUILDDIR,
        "cc": DEFAULT_CC,
        "ar": DEFAULT_AR,
        "cflags": DEFAULT_CFLAGS,
        "ldflags": DEFAULT_LDFLAGS,
        "binary_suffix": DEFAULT_BINARY_SUFFIX,

        # Policy
        "strict_collisions": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Never raises: an unreadable or corrupted file is logged and the
    defaults are returned.

    Args:
        path: Optional configuration file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The loaded configuration.
    """
    config_file = path or get_config_file_path()
    config = get_default_config()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {config_file}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    session = data.get("config", data)
    if not isinstance(session, dict):
        logger.warning("Config section is not an object. Resetting to defaults.")
        return config

    for key in config:
        if key in session:
            config[key] = session[key]

    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration as a versioned JSON document.

    Args:
        config: The configuration dictionary to save.
        path: Optional target file. Defaults to the user data directory.

    Returns:
        bool: True if the file was written.
    """
    config_file = path or get_config_file_path()
    state = {"version": CURRENT_CONFIG_VERSION, "config": dict(config)}
    try:
        ensure_parent_dir(config_file)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True
