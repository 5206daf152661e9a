from __future__ import annotations

"""
Unit tests for the Object Model and Lookup capability.

Verifies:
1. Artifact lookup of the fixed attributes 'output' and 'name'.
2. Scope lookup as a direct variable probe, last write wins.
3. Lookup on leaf variants (String, Sources) yields no result.
"""

import pytest

from ponybuild.domain.artifact import Artifact, ArtifactKind
from ponybuild.domain.objects import Lookup, Object, ObjectKind, lookup
from ponybuild.domain.scope import Scope
from ponybuild.domain.sources import Sources


def test_artifact_lookup_output_and_name():
    """Lookup 'output' on artifact 'app' returns the string 'build/app'."""
    artifact = Artifact("app", ArtifactKind.BINARY)

    output = artifact.lookup("output")
    name = artifact.lookup("name")

    assert output == Object.string("build/app")
    assert output.kind is ObjectKind.STRING
    assert name.value == "app"


@pytest.mark.parametrize("attr", ["sources", "kind", "Output", "", "build"])
def test_artifact_lookup_unknown_name_is_absent(attr):
    assert Artifact("app", ArtifactKind.BINARY).lookup(attr) is None


def test_scope_lookup_probes_variables():
    scope = Scope()
    scope.bind("version", Object.string("1.0"))

    assert scope.lookup("version").value == "1.0"
    assert scope.lookup("missing") is None


def test_scope_bind_last_write_wins():
    scope = Scope()
    scope.bind("x", Object.string("first"))
    scope.bind("x", Object.string("second"))

    assert scope.lookup("x").value == "second"
    assert len(scope.variables) == 1


def test_lookup_dispatches_on_variant():
    artifact = Artifact("libfoo", ArtifactKind.STATIC_LIB)
    inner = Scope()
    inner.bind("libfoo", Object.artifact(artifact))

    found = lookup(Object.scope(inner), "libfoo")
    assert found.kind is ObjectKind.ARTIFACT
    assert lookup(found, "output").value == "build/libfoo"


def test_lookup_on_leaf_variants_returns_none():
    assert lookup(Object.string("text"), "output") is None
    assert lookup(Object.sources(Sources()), "name") is None


def test_lookup_does_not_mutate():
    scope = Scope()
    scope.lookup("anything")
    assert scope.variables == {}


def test_objects_share_underlying_value():
    """Several Objects may reference the same artifact."""
    artifact = Artifact("app", ArtifactKind.BINARY)
    a = Object.artifact(artifact)
    b = Object.artifact(artifact)

    assert a.value is b.value
    assert a == b


def test_lookup_capability_only_on_containers():
    assert isinstance(Artifact("a", ArtifactKind.DYN_LIB), Lookup)
    assert isinstance(Scope(), Lookup)
    assert not isinstance(Sources(), Lookup)
    assert Object.string("x").has_lookup is False
