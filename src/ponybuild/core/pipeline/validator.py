from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the generation engine: ensures the configuration dictionary
conforms to the expected schema, coercing loose inputs (from the CLI or a
hand-edited JSON file) and filling missing keys with defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from ponybuild.domain.config import get_default_config

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SCHEMA
# -----------------------------------------------------------------------------

# Non-empty strings
_REQUIRED_STRING_FIELDS = ["manifest_path", "output_path", "builddir", "cc", "ar"]

# Strings where empty is meaningful (no flags, no suffix)
_OPTIONAL_STRING_FIELDS = ["cflags", "ldflags", "binary_suffix"]

_BOOL_FIELDS = ["strict_collisions"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a malformed value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _REQUIRED_STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _OPTIONAL_STRING_FIELDS:
        merged[field] = _as_str(
            merged.get(field), defaults[field], field, warnings, strict, allow_empty=True
        )

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["builddir"] = _normalize_builddir(merged["builddir"], defaults["builddir"], warnings, strict)
    merged["binary_suffix"] = _normalize_suffix(merged["binary_suffix"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(
        value: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        allow_empty: bool = False,
) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        if v or allow_empty:
            return v
        return fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_builddir(builddir: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Strip trailing separators so '$builddir/<obj>' never doubles a slash."""
    cleaned = builddir.rstrip("/\\")
    if cleaned == builddir:
        return builddir
    if not cleaned:
        if strict:
            raise ValueError(f"Invalid builddir '{builddir}'.")
        warnings.append(f"Invalid builddir '{builddir}'. Using '{fallback}'.")
        return fallback
    warnings.append(f"Builddir '{builddir}' corrected to '{cleaned}'.")
    return cleaned


def _normalize_suffix(suffix: str, warnings: List[str], strict: bool) -> str:
    """Ensure a non-empty binary suffix starts with a dot."""
    if not suffix or suffix.startswith("."):
        return suffix
    if strict:
        raise ValueError(f"Invalid binary suffix '{suffix}': must start with '.'.")
    warnings.append(f"Binary suffix '{suffix}' corrected to '.{suffix}'.")
    return "." + suffix
