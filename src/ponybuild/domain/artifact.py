from __future__ import annotations

"""
Artifact Domain Models.

Artifacts are the targets the build system produces: an executable, a
static library or a shared library. Each one aggregates the source
collections that feed its link stage.
"""

from enum import Enum
from typing import Iterator, List, Optional

from ponybuild.domain.objects import Lookup, Object
from ponybuild.domain.sources import CSource, Sources

BUILD_OUTPUT_DIR: str = "build"


class ArtifactKind(Enum):
    """Kind of target produced by an artifact's link stage."""
    BINARY = "binary"
    STATIC_LIB = "staticlib"
    DYN_LIB = "dynlib"


class Artifact(Lookup):
    """
    A named build target.

    The output path is computed once from the name at construction time and
    is never derived again. The kind is fixed for the artifact's lifetime.

    Attributes:
        name: Target identifier.
        output: Output path, 'build/<name>'.
        kind: Link-stage flavour.
        sources: Source collections in the order they were pushed.
    """

    def __init__(self, name: str, kind: ArtifactKind) -> None:
        self._name = name
        self._output = f"{BUILD_OUTPUT_DIR}/{name}"
        self._kind = kind
        self.sources: List[Sources] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def output(self) -> str:
        return self._output

    @property
    def kind(self) -> ArtifactKind:
        return self._kind

    def push_sources(self, sources: Sources) -> None:
        """
        Attach a source collection to this artifact.

        The same collection may be pushed more than once; each push yields
        its own set of compile edges.
        """
        self.sources.append(sources)

    def iter_c_sources(self) -> Iterator[CSource]:
        """Yield every source entry across all collections, in order."""
        for collection in self.sources:
            yield from collection

    def lookup(self, name: str) -> Optional[Object]:
        if name == "output":
            return Object.string(self._output)
        if name == "name":
            return Object.string(self._name)
        return None

    def __repr__(self) -> str:
        return f"Artifact(name={self._name!r}, kind={self._kind.name}, sources={len(self.sources)})"
