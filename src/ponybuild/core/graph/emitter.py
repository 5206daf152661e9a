from __future__ import annotations

"""
Ninja Script Emitter.

Writes the global preamble (variables and rule templates) followed by the
edges of a compiled graph. Emission is a single append-only pass over an
explicit text sink: rule definitions always precede the edges that use them.
"""

import io
import logging
from typing import List, Optional, TextIO, Tuple

from ponybuild.core.graph.compiler import ArtifactRules, CompiledGraph, compile_scope
from ponybuild.domain.constants import DEFAULT_SCRIPT_NAME
from ponybuild.domain.errors import ScriptWriteError
from ponybuild.domain.scope import Scope
from ponybuild.domain.toolchain import ToolchainConfig

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RULE TEMPLATES
# -----------------------------------------------------------------------------

# (name, [(key, value), ...]) in emission order
RULE_TEMPLATES: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("cc", [
        ("command", "$cc -MMD -MT $out -MF $out.d $cflags -c $in -o $out"),
        ("depfile", "$out.d"),
        ("deps", "gcc"),
        ("description", "CC      $in"),
    ]),
    ("ar", [
        ("command", "$ar rcs $out $in"),
        ("description", "AR      $out"),
    ]),
    ("link", [
        ("command", "$cc -o $out $in $ldflags"),
        ("description", "LINK    $out"),
    ]),
    ("linkso", [
        ("command", "$cc -shared -o $out $in $ldflags"),
        ("description", "LINKSO  $out"),
    ]),
]


def _variable(name: str, value: str) -> str:
    return f"{name} = {value}".rstrip()


def render_preamble(toolchain: ToolchainConfig) -> str:
    """
    Render the global variables and the four rule blocks.

    Args:
        toolchain: Values for the global variables.

    Returns:
        str: Preamble text, ending with a blank line after the last rule.
    """
    lines = [
        _variable("builddir", toolchain.builddir),
        _variable("cc", toolchain.cc),
        _variable("ar", toolchain.ar),
        _variable("cflags", toolchain.cflags),
        _variable("ldflags", toolchain.ldflags),
        "",
    ]
    for name, bindings in RULE_TEMPLATES:
        lines.append(f"rule {name}")
        lines.extend(f"  {key} = {value}" for key, value in bindings)
        lines.append("")
    return "\n".join(lines) + "\n"


# -----------------------------------------------------------------------------
# SINK WRITERS
# -----------------------------------------------------------------------------

def write_artifact_rules(sink: TextIO, rules: ArtifactRules) -> None:
    """Write one artifact's compile edges, its link edge and a blank line."""
    for edge in rules.compile_edges:
        sink.write(edge.render() + "\n")
    sink.write(rules.link_edge.render() + "\n\n")


def write_build_script(sink: TextIO, graph: CompiledGraph, toolchain: ToolchainConfig) -> None:
    """
    Write a complete build script to an open text sink.

    Args:
        sink: Writable text stream.
        graph: Compiled edges.
        toolchain: Values for the preamble variables.
    """
    sink.write(render_preamble(toolchain))
    for rules in graph.rules:
        write_artifact_rules(sink, rules)


def render_build_script(
        scope: Scope,
        toolchain: Optional[ToolchainConfig] = None,
        *,
        strict_collisions: bool = False,
) -> Tuple[str, CompiledGraph]:
    """
    Compile a scope and render the script in memory.

    Returns:
        Tuple[str, CompiledGraph]: Script text and the compiled graph.
    """
    toolchain = toolchain or ToolchainConfig()
    graph = compile_scope(
        scope,
        binary_suffix=toolchain.binary_suffix,
        strict_collisions=strict_collisions,
    )
    buffer = io.StringIO()
    write_build_script(buffer, graph, toolchain)
    return buffer.getvalue(), graph


# -----------------------------------------------------------------------------
# FILE OUTPUT
# -----------------------------------------------------------------------------

def make_ninja_file(
        scope: Scope,
        path: str = DEFAULT_SCRIPT_NAME,
        toolchain: Optional[ToolchainConfig] = None,
        *,
        strict_collisions: bool = False,
) -> CompiledGraph:
    """
    Compile a scope and write the build script to a file.

    The file is fully regenerated. A failure mid-write leaves the partial
    file in place; callers must not run the build against it.

    Args:
        scope: Top scope to compile.
        path: Script file path.
        toolchain: Values for the preamble variables.
        strict_collisions: Raise on object path collisions before writing.

    Returns:
        CompiledGraph: The edges that were written.

    Raises:
        ScriptWriteError: If the file cannot be created or written.
        ObjectPathCollisionError: If strict_collisions is set and a collision exists.
    """
    toolchain = toolchain or ToolchainConfig()
    graph = compile_scope(
        scope,
        binary_suffix=toolchain.binary_suffix,
        strict_collisions=strict_collisions,
    )

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            write_build_script(f, graph, toolchain)
    except OSError as e:
        raise ScriptWriteError(path, e) from e

    logger.info(
        f"Wrote {path}: {graph.link_edge_count} artifact(s), "
        f"{graph.compile_edge_count} compile edge(s)."
    )
    return graph
