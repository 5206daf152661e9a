from __future__ import annotations

"""
Toolchain Model.

Holds the values substituted into the global variables of the emitted
build script.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ponybuild.domain.constants import (
    DEFAULT_AR,
    DEFAULT_BINARY_SUFFIX,
    DEFAULT_BUILDDIR,
    DEFAULT_CC,
    DEFAULT_CFLAGS,
    DEFAULT_LDFLAGS,
)


@dataclass(frozen=True)
class ToolchainConfig:
    """
    Immutable toolchain settings for one emission.

    Attributes:
        builddir: Value of the 'builddir' script variable.
        cc: Compiler driver used for compiling and linking.
        ar: Archiver used for static libraries.
        cflags: Default compiler flags.
        ldflags: Default linker flags.
        binary_suffix: Suffix appended to executable outputs.
    """
    builddir: str = DEFAULT_BUILDDIR
    cc: str = DEFAULT_CC
    ar: str = DEFAULT_AR
    cflags: str = DEFAULT_CFLAGS
    ldflags: str = DEFAULT_LDFLAGS
    binary_suffix: str = DEFAULT_BINARY_SUFFIX

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> ToolchainConfig:
        """Build the toolchain from a validated configuration dictionary."""
        return cls(
            builddir=cfg.get("builddir", DEFAULT_BUILDDIR),
            cc=cfg.get("cc", DEFAULT_CC),
            ar=cfg.get("ar", DEFAULT_AR),
            cflags=cfg.get("cflags", DEFAULT_CFLAGS),
            ldflags=cfg.get("ldflags", DEFAULT_LDFLAGS),
            binary_suffix=cfg.get("binary_suffix", DEFAULT_BINARY_SUFFIX),
        )
