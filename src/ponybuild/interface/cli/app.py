from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted file, command-line overrides), generation, and result
rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ponybuild.core.pipeline.engine import run_generation
from ponybuild.core.pipeline.manifest import default_scope
from ponybuild.core.pipeline.validator import validate_config
from ponybuild.domain.config import get_default_config, load_config
from ponybuild.domain.generation_models import GenerationResult
from ponybuild.infra.fs import normalize_path
from ponybuild.infra.logging import LoggingConfig, configure_logging, get_logger
from ponybuild.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_MANIFEST = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    scope = default_scope() if args.demo else None

    manifest_path = normalize_path(clean_conf["manifest_path"], os.getcwd())
    if scope is None and not os.path.isfile(manifest_path):
        msg = f"Manifest not found: {manifest_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_MANIFEST

    try:
        result = run_generation(clean_conf, scope=scope, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge the non-None overrides of known keys into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k in get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """
    Print the generation result to the terminal.

    A dry run prints the script itself to stdout so it can be piped.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    if summary.get("dry_run"):
        sys.stdout.write(result.script)
        return

    print(f"Wrote {result.output_path}")
    print(f"Artifacts: {', '.join(summary.get('artifacts', [])) or '(none)'}")
    print(f"Compile edges: {summary.get('compile_edges', 0)}")
    print(f"Link edges: {summary.get('link_edges', 0)}")

    collisions = summary.get("collisions", [])
    if collisions:
        print(f"Object path collisions: {len(collisions)}")
        for obj, first, second in collisions:
            print(f"  - {obj}: {first}, {second}")


if __name__ == "__main__":
    sys.exit(main())
