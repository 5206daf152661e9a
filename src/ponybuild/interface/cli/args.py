from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ponybuild CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="ponybuild",
        description="Generate a Ninja build script from a JSON build manifest.",
    )

    # --- Path Management ---
    p.add_argument(
        "-m", "--manifest",
        dest="manifest_path",
        default=None,
        help="Build manifest to evaluate (default: build.json).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Build script to write (default: build.ninja).",
    )
    p.add_argument(
        "--demo",
        action="store_true",
        help="Ignore the manifest and emit the built-in demo target.",
    )

    # --- Toolchain ---
    p.add_argument("--builddir", default=None, help="Object file directory.")
    p.add_argument("--cc", default=None, help="Compiler driver.")
    p.add_argument("--ar", default=None, help="Archiver for static libraries.")
    p.add_argument("--cflags", default=None, help="Default compiler flags.")
    p.add_argument("--ldflags", default=None, help="Default linker flags.")
    p.add_argument(
        "--binary-suffix",
        dest="binary_suffix",
        default=None,
        help="Suffix appended to executables (default: .exe).",
    )
    p.add_argument(
        "--strict-collisions",
        action="store_true",
        help="Fail when two sources compile to the same object file.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Configuration file to load instead of the user default.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any persisted configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the script to stdout instead of writing it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result summary as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None and do not override anything.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "manifest_path": args.manifest_path,
        "output_path": args.output_path,
        "builddir": args.builddir,
        "cc": args.cc,
        "ar": args.ar,
        "cflags": args.cflags,
        "ldflags": args.ldflags,
        "binary_suffix": args.binary_suffix,
    }

    if args.strict_collisions:
        overrides["strict_collisions"] = True

    return overrides
