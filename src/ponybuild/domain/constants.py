from __future__ import annotations

"""
Domain Constants.

Centralized defaults for the toolchain, the emitted script and the
persisted configuration.
"""

from typing import Dict

from ponybuild.domain.artifact import ArtifactKind

CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_MANIFEST_NAME = "build.json"
DEFAULT_SCRIPT_NAME = "build.ninja"

# -----------------------------------------------------------------------------
# TOOLCHAIN DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_BUILDDIR = "build"
DEFAULT_CC = "gcc"
DEFAULT_AR = "ar"
DEFAULT_CFLAGS = "-g -Wall"
DEFAULT_LDFLAGS = ""
DEFAULT_BINARY_SUFFIX = ".exe"

# -----------------------------------------------------------------------------
# LINK STAGE
# -----------------------------------------------------------------------------
LINK_RULES: Dict[ArtifactKind, str] = {
    ArtifactKind.BINARY: "link",
    ArtifactKind.STATIC_LIB: "ar",
    ArtifactKind.DYN_LIB: "linkso",
}

# Manifest spellings accepted for each artifact kind
KIND_ALIASES: Dict[str, ArtifactKind] = {
    "binary": ArtifactKind.BINARY,
    "bin": ArtifactKind.BINARY,
    "staticlib": ArtifactKind.STATIC_LIB,
    "static": ArtifactKind.STATIC_LIB,
    "dynlib": ArtifactKind.DYN_LIB,
    "shared": ArtifactKind.DYN_LIB,
}

# Built-in demo target
DEMO_ARTIFACT_NAME = "ponygame-runner"
DEMO_SOURCE = "src/pony_main.c"
