from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample build graphs.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from ponybuild.domain.artifact import Artifact, ArtifactKind  # noqa: E402
from ponybuild.domain.scope import Scope  # noqa: E402
from ponybuild.domain.sources import Sources  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys of 'ponybuild.domain.config.get_default_config'.
    """
    return {
        # IO Paths
        "manifest_path": "build.json",
        "output_path": "build.ninja",

        # Toolchain
        "builddir": "build",
        "cc": "gcc",
        "ar": "ar",
        "cflags": "-g -Wall",
        "ldflags": "",
        "binary_suffix": ".exe",

        # Policy
        "strict_collisions": False,
    }


@pytest.fixture
def sample_manifest() -> Dict[str, Any]:
    """Manifest with a shared source list, a binary and a static library."""
    return {
        "variables": {"version": "1.0"},
        "sources": {"core": ["a/x.c", "b/y.c"]},
        "artifacts": [
            {"name": "libfoo", "kind": "staticlib", "sources": ["core"]},
            {"name": "app", "kind": "binary", "sources": [["src/main.c"], "core"]},
        ],
    }


@pytest.fixture
def sample_scope() -> Scope:
    """
    Scope with the two reference targets:
    - 'app' (binary) built from src/main.c
    - 'libfoo' (static library) built from a/x.c and b/y.c
    """
    scope = Scope()

    app_sources = Sources()
    app_sources.push_c_source("src/main.c")
    app = Artifact("app", ArtifactKind.BINARY)
    app.push_sources(app_sources)

    lib_sources = Sources()
    lib_sources.push_c_source("a/x.c")
    lib_sources.push_c_source("b/y.c")
    lib = Artifact("libfoo", ArtifactKind.STATIC_LIB)
    lib.push_sources(lib_sources)

    scope.push_artifact(app)
    scope.push_artifact(lib)
    return scope
