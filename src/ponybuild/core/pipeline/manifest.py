from __future__ import annotations

"""
Build Manifest Evaluator.

Populates a Scope from a JSON build manifest:

    {
        "variables": {"version": "1.0"},
        "sources": {"core": ["src/a.c", "src/b.c"]},
        "artifacts": [
            {"name": "app", "kind": "binary", "sources": ["core", ["src/main.c"]]}
        ],
        "scopes": [{ ...same shape... }]
    }

Named source lists and artifacts are bound in the scope that declares them.
A string entry in an artifact's 'sources' is a reference, resolved from the
innermost scope outwards; a list entry is an inline collection.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ponybuild.domain.artifact import Artifact, ArtifactKind
from ponybuild.domain.constants import DEMO_ARTIFACT_NAME, DEMO_SOURCE, KIND_ALIASES
from ponybuild.domain.errors import ManifestError
from ponybuild.domain.objects import Object, ObjectKind
from ponybuild.domain.scope import Scope
from ponybuild.domain.sources import Sources

logger = logging.getLogger(__name__)

_SCOPE_KEYS = {"variables", "sources", "artifacts", "scopes"}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_manifest(path: str) -> Scope:
    """
    Read and evaluate a manifest file.

    Args:
        path: JSON manifest path.

    Returns:
        Scope: The populated top scope.

    Raises:
        OSError: If the file cannot be read.
        ManifestError: If the document is not UTF-8 JSON or not a valid manifest.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ManifestError(f"{path}: invalid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise ManifestError(f"{path}: not valid UTF-8 ({e})") from e

    logger.debug(f"Evaluating manifest {path}")
    return build_scope(data)


def build_scope(data: Any, enclosing: Optional[List[Scope]] = None) -> Scope:
    """
    Evaluate one manifest scope document.

    Args:
        data: Decoded scope document.
        enclosing: Enclosing scopes, innermost first.

    Returns:
        Scope: The populated scope.

    Raises:
        ManifestError: On a malformed document or an unresolved reference.
    """
    if not isinstance(data, dict):
        raise ManifestError(f"Scope must be an object, got {type(data).__name__}.")

    unknown = set(data) - _SCOPE_KEYS
    if unknown:
        logger.warning(f"Ignoring unknown manifest keys: {', '.join(sorted(unknown))}")

    scope = Scope()
    chain = [scope] + list(enclosing or [])

    for name, value in _as_mapping(data, "variables").items():
        if not isinstance(value, str):
            raise ManifestError(f"Variable '{name}' must be a string.")
        scope.bind(name, Object.string(value))

    for name, paths in _as_mapping(data, "sources").items():
        scope.bind(name, Object.sources(_make_sources(paths, f"sources '{name}'")))

    for entry in _as_list(data, "artifacts"):
        artifact = _make_artifact(entry, chain)
        scope.push_artifact(artifact)
        scope.bind(artifact.name, Object.artifact(artifact))

    for child in _as_list(data, "scopes"):
        scope.push_scope(build_scope(child, chain))

    return scope


def resolve(chain: List[Scope], name: str) -> Optional[Object]:
    """Resolve a name from the innermost scope outwards."""
    for scope in chain:
        found = scope.lookup(name)
        if found is not None:
            return found
    return None


def default_scope() -> Scope:
    """Build the scope used when no manifest is given: the demo runner binary."""
    scope = Scope()
    sources = Sources()
    sources.push_c_source(DEMO_SOURCE)

    artifact = Artifact(DEMO_ARTIFACT_NAME, ArtifactKind.BINARY)
    artifact.push_sources(sources)

    scope.push_artifact(artifact)
    scope.bind(artifact.name, Object.artifact(artifact))
    return scope


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_mapping(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ManifestError(f"'{key}' must be an object.")
    return value


def _as_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ManifestError(f"'{key}' must be a list.")
    return value


def _make_sources(paths: Any, where: str) -> Sources:
    if not isinstance(paths, list):
        raise ManifestError(f"{where} must be a list of paths.")
    sources = Sources()
    for path in paths:
        if not isinstance(path, str) or not path.strip():
            raise ManifestError(f"{where} contains an invalid path: {path!r}")
        sources.push_c_source(path.strip())
    return sources


def _make_artifact(entry: Any, chain: List[Scope]) -> Artifact:
    if not isinstance(entry, dict):
        raise ManifestError("Artifact declaration must be an object.")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ManifestError("Artifact declaration requires a non-empty 'name'.")
    name = name.strip()

    kind_name = str(entry.get("kind", "binary")).strip().lower()
    kind = KIND_ALIASES.get(kind_name)
    if kind is None:
        raise ManifestError(f"Artifact '{name}': unknown kind '{kind_name}'.")

    artifact = Artifact(name, kind)

    refs = entry.get("sources", [])
    if not isinstance(refs, list):
        raise ManifestError(f"Artifact '{name}': 'sources' must be a list.")

    for ref in refs:
        if isinstance(ref, list):
            artifact.push_sources(_make_sources(ref, f"artifact '{name}'"))
            continue
        if not isinstance(ref, str):
            raise ManifestError(f"Artifact '{name}': invalid sources entry {ref!r}.")

        found = resolve(chain, ref)
        if found is None:
            raise ManifestError(f"Artifact '{name}': undefined sources '{ref}'.")
        if found.kind is not ObjectKind.SOURCES:
            raise ManifestError(f"Artifact '{name}': '{ref}' is a {found.kind.value}, not sources.")
        artifact.push_sources(found.value)

    return artifact
