from __future__ import annotations

"""
Build Graph Compiler.

Translates the artifacts declared in a scope into build edges:
1. One compile edge per source entry, in declaration order.
2. One link-stage edge per artifact whose rule depends on the artifact kind
   and whose inputs are every object file of the artifact, flattened in order.

Only the artifacts of the given scope are compiled; child scopes are not
walked.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ponybuild.domain.artifact import Artifact, ArtifactKind
from ponybuild.domain.constants import DEFAULT_BINARY_SUFFIX, LINK_RULES
from ponybuild.domain.errors import ObjectPathCollisionError
from ponybuild.domain.scope import Scope
from ponybuild.domain.sources import CSource

logger = logging.getLogger(__name__)

COMPILE_RULE: str = "cc"
BUILDDIR_VAR: str = "$builddir"


# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildEdge:
    """
    One 'build' statement of the script.

    Attributes:
        output: Path produced by the edge.
        rule: Name of the rule producing it.
        inputs: Explicit inputs, in order.
    """
    output: str
    rule: str
    inputs: Tuple[str, ...] = ()

    def render(self) -> str:
        """Render the edge as a single script line, without newline."""
        line = f"build {self.output}: {self.rule}"
        if self.inputs:
            line += " " + " ".join(self.inputs)
        return line


@dataclass(frozen=True)
class ArtifactRules:
    """Edges derived from a single artifact."""
    artifact: Artifact
    compile_edges: Tuple[BuildEdge, ...]
    link_edge: BuildEdge


@dataclass
class CompiledGraph:
    """
    Edges for a whole scope plus the diagnostics gathered while deriving them.

    Attributes:
        rules: Per-artifact edges in scope declaration order.
        collisions: (object_path, first_input, second_input) triples.
        skipped_scopes: Number of child scopes that were not compiled.
    """
    rules: List[ArtifactRules] = field(default_factory=list)
    collisions: List[Tuple[str, str, str]] = field(default_factory=list)
    skipped_scopes: int = 0

    @property
    def compile_edge_count(self) -> int:
        return sum(len(r.compile_edges) for r in self.rules)

    @property
    def link_edge_count(self) -> int:
        return len(self.rules)


# -----------------------------------------------------------------------------
# EDGE DERIVATION
# -----------------------------------------------------------------------------

def escape_path(path: str) -> str:
    """
    Escape a path for use in a build statement.

    Ninja treats '$', spaces and ':' as syntax in build lines; each is
    prefixed with '$'.
    """
    return path.replace("$", "$$").replace(" ", "$ ").replace(":", "$:")


def object_target(c_source: CSource) -> str:
    """Return the script path of a source's object file."""
    return f"{BUILDDIR_VAR}/{escape_path(c_source.output_path)}"


def link_output(artifact: Artifact, binary_suffix: str = DEFAULT_BINARY_SUFFIX) -> str:
    """
    Return the path produced by an artifact's link stage.

    Executables get the platform binary suffix; libraries use the artifact
    output path unchanged. The result is escaped for a build statement.
    """
    if artifact.kind is ArtifactKind.BINARY:
        return escape_path(f"{artifact.output}{binary_suffix}")
    return escape_path(artifact.output)


def compile_artifact(
        artifact: Artifact,
        binary_suffix: str = DEFAULT_BINARY_SUFFIX,
) -> ArtifactRules:
    """
    Derive the compile edges and the link-stage edge of one artifact.

    An artifact without sources still yields a link edge, with no inputs.

    Args:
        artifact: Artifact to compile.
        binary_suffix: Suffix for executable outputs.

    Returns:
        ArtifactRules: The derived edges.
    """
    compile_edges: List[BuildEdge] = []
    objects: List[str] = []

    for c_source in artifact.iter_c_sources():
        target = object_target(c_source)
        source = escape_path(c_source.input_path)
        compile_edges.append(BuildEdge(output=target, rule=COMPILE_RULE, inputs=(source,)))
        objects.append(target)

    link_edge = BuildEdge(
        output=link_output(artifact, binary_suffix),
        rule=LINK_RULES[artifact.kind],
        inputs=tuple(objects),
    )

    if not objects:
        logger.warning(f"Artifact '{artifact.name}' has no sources; its link edge has no inputs.")

    return ArtifactRules(artifact=artifact, compile_edges=tuple(compile_edges), link_edge=link_edge)


def find_collisions(rules: List[ArtifactRules]) -> List[Tuple[str, str, str]]:
    """
    Detect distinct inputs that derive the same object file.

    Repeated edges for the same input (a collection pushed twice or shared
    between artifacts) are not collisions.

    Returns:
        List[Tuple[str, str, str]]: (object_path, first_input, second_input).
    """
    owners: Dict[str, str] = {}
    collisions: List[Tuple[str, str, str]] = []

    for artifact_rules in rules:
        for edge in artifact_rules.compile_edges:
            source = edge.inputs[0]
            if edge.output not in owners:
                owners[edge.output] = source
                continue
            first = owners[edge.output]
            if first != source:
                collisions.append((edge.output, first, source))
            else:
                logger.debug(f"Duplicate compile edge for {edge.output} ({source}).")

    return collisions


def compile_scope(
        scope: Scope,
        *,
        binary_suffix: str = DEFAULT_BINARY_SUFFIX,
        strict_collisions: bool = False,
) -> CompiledGraph:
    """
    Compile every artifact of a scope, in declaration order.

    Args:
        scope: Scope whose artifacts are compiled.
        binary_suffix: Suffix for executable outputs.
        strict_collisions: Raise instead of warning on object path collisions.

    Returns:
        CompiledGraph: Edges and diagnostics.

    Raises:
        ObjectPathCollisionError: If strict_collisions is set and a collision exists.
    """
    graph = CompiledGraph(skipped_scopes=len(scope.scopes))

    for artifact in scope.iter_artifacts():
        graph.rules.append(compile_artifact(artifact, binary_suffix))
        logger.debug(f"Compiled artifact '{artifact.name}' ({artifact.kind.value}).")

    if graph.skipped_scopes:
        logger.debug(f"{graph.skipped_scopes} child scope(s) not compiled.")

    graph.collisions = find_collisions(graph.rules)
    if graph.collisions:
        if strict_collisions:
            raise ObjectPathCollisionError(graph.collisions)
        for obj, first, second in graph.collisions:
            logger.warning(f"Object path collision: '{first}' and '{second}' both compile to {obj}")

    return graph
