from __future__ import annotations

"""
Generation Orchestration Pipeline.

Coordinates a full run:
1. Validates configuration.
2. Evaluates the build manifest into a scope (unless one is supplied).
3. Compiles the scope into build edges.
4. Emits the script to its file, or renders it in memory on dry runs.

Every failure is reported through a GenerationResult; nothing is raised to
the interface layer.
"""

import logging
import os
from typing import Any, Dict, Optional

from ponybuild.core.graph.compiler import CompiledGraph
from ponybuild.core.graph.emitter import make_ninja_file, render_build_script
from ponybuild.core.pipeline.manifest import load_manifest
from ponybuild.core.pipeline.validator import validate_config
from ponybuild.domain.errors import ManifestError, ObjectPathCollisionError, ScriptWriteError
from ponybuild.domain.generation_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from ponybuild.domain.scope import Scope
from ponybuild.domain.toolchain import ToolchainConfig
from ponybuild.infra.fs import normalize_path, safe_mkdir

logger = logging.getLogger(__name__)


def run_generation(
        config: Optional[Dict[str, Any]],
        *,
        scope: Optional[Scope] = None,
        dry_run: bool = False,
) -> GenerationResult:
    """
    Execute the manifest-to-script pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        scope: Pre-built top scope; skips manifest evaluation when given.
        dry_run: If True, render the script in memory without touching disk.

    Returns:
        GenerationResult: Status, script text (dry run) and summary.
    """
    logger.info("Generation started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    output_path = normalize_path(cfg["output_path"], cwd)
    manifest_path = "" if scope is not None else normalize_path(cfg["manifest_path"], cwd)
    toolchain = ToolchainConfig.from_config(cfg)

    # -------------------------------------------------------------------------
    # 2) Manifest Evaluation
    # -------------------------------------------------------------------------
    if scope is None:
        if not os.path.isfile(manifest_path):
            msg = f"Manifest not found: {manifest_path}"
            logger.error(msg)
            return create_error_result(msg, manifest_path, output_path)
        try:
            scope = load_manifest(manifest_path)
        except (OSError, ManifestError) as e:
            msg = f"Invalid manifest {manifest_path}: {e}"
            logger.error(msg)
            return create_error_result(msg, manifest_path, output_path)

    # -------------------------------------------------------------------------
    # 3) Compile & Emit
    # -------------------------------------------------------------------------
    script = ""
    try:
        if dry_run:
            script, graph = render_build_script(
                scope, toolchain, strict_collisions=bool(cfg["strict_collisions"])
            )
            logger.info("Dry run: script rendered in memory only.")
        else:
            ok, err = safe_mkdir(os.path.dirname(output_path))
            if not ok:
                msg = f"Failed to write {output_path}: {err}"
                logger.critical(msg)
                return create_error_result(msg, manifest_path, output_path)
            graph = make_ninja_file(
                scope,
                output_path,
                toolchain,
                strict_collisions=bool(cfg["strict_collisions"]),
            )
    except ObjectPathCollisionError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), manifest_path, output_path,
            summary_extra={"collisions": [list(c) for c in e.collisions]},
        )
    except ScriptWriteError as e:
        # The partial file is left as is; it must not be built
        logger.critical(str(e))
        return create_error_result(str(e), manifest_path, output_path)

    # -------------------------------------------------------------------------
    # 4) Finalize
    # -------------------------------------------------------------------------
    summary = _summarize(graph, dry_run)
    logger.info("Generation completed successfully.")
    return create_success_result(manifest_path, output_path, script, summary)


def _summarize(graph: CompiledGraph, dry_run: bool) -> Dict[str, Any]:
    return {
        "artifacts": [r.artifact.name for r in graph.rules],
        "compile_edges": graph.compile_edge_count,
        "link_edges": graph.link_edge_count,
        "skipped_scopes": graph.skipped_scopes,
        "collisions": [list(c) for c in graph.collisions],
        "dry_run": dry_run,
    }
