from __future__ import annotations

"""
Generation Domain Data Models.

Defines the result object passed from the generation engine to the
interface layer, plus the factories that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete manifest-to-script generation.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        manifest_path: Manifest that was evaluated (empty for in-memory scopes).
        output_path: Absolute path of the build script.
        script: Rendered script text (populated on dry runs).
        summary: Edge counts and execution metadata.
    """
    ok: bool
    error: str

    manifest_path: str
    output_path: str

    script: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        manifest_path: str = "",
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        manifest_path: Manifest being evaluated when the failure occurred.
        output_path: Target script path.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result object.
    """
    return GenerationResult(
        ok=False,
        error=error,
        manifest_path=manifest_path,
        output_path=output_path,
        summary=summary_extra or {},
    )


def create_success_result(
        manifest_path: str,
        output_path: str,
        script: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        manifest_path: Evaluated manifest.
        output_path: Written (or simulated) script path.
        script: Rendered script text, if kept.
        summary_extra: Final execution metrics.

    Returns:
        GenerationResult: An immutable success result object.
    """
    return GenerationResult(
        ok=True,
        error="",
        manifest_path=manifest_path,
        output_path=output_path,
        script=script,
        summary=summary_extra or {},
    )
