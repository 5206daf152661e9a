from __future__ import annotations

"""
Scope Domain Model.

A scope is a lexical environment: name bindings, the artifacts declared in
it, and its nested child scopes. Scopes are populated by the manifest
evaluator and treated as read-only once handed to the graph compiler.
"""

from typing import Dict, Iterator, List, Optional

from ponybuild.domain.artifact import Artifact
from ponybuild.domain.objects import Lookup, Object


class Scope(Lookup):
    """
    Lexical namespace holding variables, artifacts and child scopes.

    Attributes:
        artifacts: Declared artifacts in declaration order.
        variables: Name bindings; rebinding a name replaces the previous Object.
        scopes: Nested child scopes in declaration order.
    """

    def __init__(self) -> None:
        self.artifacts: List[Artifact] = []
        self.variables: Dict[str, Object] = {}
        self.scopes: List[Scope] = []

    def push_artifact(self, artifact: Artifact) -> None:
        self.artifacts.append(artifact)

    def push_scope(self, scope: Scope) -> None:
        self.scopes.append(scope)

    def bind(self, name: str, obj: Object) -> None:
        """Bind a name in this scope. Last write wins."""
        self.variables[name] = obj

    def lookup(self, name: str) -> Optional[Object]:
        return self.variables.get(name)

    def iter_artifacts(self) -> Iterator[Artifact]:
        return iter(self.artifacts)

    def __repr__(self) -> str:
        return (
            f"Scope(artifacts={len(self.artifacts)}, "
            f"variables={len(self.variables)}, scopes={len(self.scopes)})"
        )
