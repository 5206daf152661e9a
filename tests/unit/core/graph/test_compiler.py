from __future__ import annotations

"""
Unit tests for the Build Graph Compiler.

Verifies:
1. One compile edge per source and exactly one link edge per artifact.
2. Link rule and output path per artifact kind.
3. Declaration order of artifacts and sources.
4. Object path collision detection and policy.
"""

import pytest

from ponybuild.core.graph.compiler import (
    BuildEdge,
    compile_artifact,
    compile_scope,
    escape_path,
    find_collisions,
    link_output,
)
from ponybuild.domain.artifact import Artifact, ArtifactKind
from ponybuild.domain.errors import ObjectPathCollisionError
from ponybuild.domain.scope import Scope
from ponybuild.domain.sources import Sources


def _artifact(name, kind, *collections):
    artifact = Artifact(name, kind)
    for paths in collections:
        sources = Sources()
        for p in paths:
            sources.push_c_source(p)
        artifact.push_sources(sources)
    return artifact


# -----------------------------------------------------------------------------
# EDGE DERIVATION
# -----------------------------------------------------------------------------

def test_binary_with_single_source():
    rules = compile_artifact(_artifact("app", ArtifactKind.BINARY, ["src/main.c"]))

    assert [e.render() for e in rules.compile_edges] == [
        "build $builddir/src_main.c.o: cc src/main.c"
    ]
    assert rules.link_edge.render() == "build build/app.exe: link $builddir/src_main.c.o"


def test_static_library_with_two_sources():
    rules = compile_artifact(_artifact("libfoo", ArtifactKind.STATIC_LIB, ["a/x.c", "b/y.c"]))

    assert [e.output for e in rules.compile_edges] == ["$builddir/a_x.c.o", "$builddir/b_y.c.o"]
    assert rules.link_edge.render() == "build build/libfoo: ar $builddir/a_x.c.o $builddir/b_y.c.o"


def test_dynamic_library_uses_linkso():
    rules = compile_artifact(_artifact("libbar", ArtifactKind.DYN_LIB, ["bar.c"]))

    assert rules.link_edge.rule == "linkso"
    assert rules.link_edge.output == "build/libbar"


@pytest.mark.parametrize("kind, rule", [
    (ArtifactKind.BINARY, "link"),
    (ArtifactKind.STATIC_LIB, "ar"),
    (ArtifactKind.DYN_LIB, "linkso"),
])
def test_empty_artifact_still_gets_one_link_edge(kind, rule):
    rules = compile_artifact(Artifact("empty", kind))

    assert rules.compile_edges == ()
    assert rules.link_edge.rule == rule
    assert rules.link_edge.inputs == ()
    assert rules.link_edge.render().endswith(f": {rule}")


def test_link_inputs_flatten_collections_in_order():
    artifact = _artifact("app", ArtifactKind.BINARY, ["z.c", "y.c"], ["x.c"])
    rules = compile_artifact(artifact)

    assert rules.link_edge.inputs == ("$builddir/z.c.o", "$builddir/y.c.o", "$builddir/x.c.o")
    assert [e.inputs[0] for e in rules.compile_edges] == ["z.c", "y.c", "x.c"]


def test_custom_binary_suffix_only_affects_binaries():
    assert link_output(Artifact("app", ArtifactKind.BINARY), "") == "build/app"
    assert link_output(Artifact("lib", ArtifactKind.STATIC_LIB), ".exe") == "build/lib"


def test_build_edge_render_without_inputs():
    assert BuildEdge(output="out", rule="ar").render() == "build out: ar"


@pytest.mark.parametrize("raw, escaped", [
    ("plain/path.c", "plain/path.c"),
    ("my dir/a.c", "my$ dir/a.c"),
    ("c:/src/a.c", "c$:/src/a.c"),
    ("gen/$x.c", "gen/$$x.c"),
])
def test_escape_path(raw, escaped):
    assert escape_path(raw) == escaped


def test_special_characters_are_escaped_in_edges():
    rules = compile_artifact(_artifact("my app", ArtifactKind.BINARY, ["my dir/c:file.c", "gen/$x.c"]))

    assert [e.render() for e in rules.compile_edges] == [
        "build $builddir/my$ dir_c$:file.c.o: cc my$ dir/c$:file.c",
        "build $builddir/gen_$$x.c.o: cc gen/$$x.c",
    ]
    assert rules.link_edge.render() == (
        "build build/my$ app.exe: link $builddir/my$ dir_c$:file.c.o $builddir/gen_$$x.c.o"
    )


# -----------------------------------------------------------------------------
# SCOPE COMPILATION
# -----------------------------------------------------------------------------

def test_compile_scope_counts_and_order():
    scope = Scope()
    sizes = {"one": 3, "two": 0, "three": 2}
    for name, n in sizes.items():
        scope.push_artifact(_artifact(name, ArtifactKind.STATIC_LIB, [f"{name}/{i}.c" for i in range(n)]))

    graph = compile_scope(scope)

    assert [r.artifact.name for r in graph.rules] == ["one", "two", "three"]
    assert graph.link_edge_count == 3
    assert graph.compile_edge_count == 5


def test_compile_scope_does_not_walk_child_scopes():
    child = Scope()
    child.push_artifact(_artifact("hidden", ArtifactKind.BINARY, ["h.c"]))
    scope = Scope()
    scope.push_scope(child)

    graph = compile_scope(scope)

    assert graph.rules == []
    assert graph.skipped_scopes == 1


def test_shared_collection_pushed_twice_is_not_a_collision():
    shared = Sources()
    shared.push_c_source("common.c")
    artifact = Artifact("app", ArtifactKind.BINARY)
    artifact.push_sources(shared)
    artifact.push_sources(shared)
    scope = Scope()
    scope.push_artifact(artifact)

    graph = compile_scope(scope)

    assert graph.compile_edge_count == 2
    assert graph.collisions == []


def test_collision_detected_and_warned(caplog):
    scope = Scope()
    scope.push_artifact(_artifact("app", ArtifactKind.BINARY, ["a/b.c", "a_b.c"]))

    with caplog.at_level("WARNING"):
        graph = compile_scope(scope)

    assert graph.collisions == [("$builddir/a_b.c.o", "a/b.c", "a_b.c")]
    assert graph.compile_edge_count == 2
    assert "Object path collision" in caplog.text


def test_collision_across_artifacts():
    rules = [
        compile_artifact(_artifact("one", ArtifactKind.BINARY, ["x/y.c"])),
        compile_artifact(_artifact("two", ArtifactKind.BINARY, ["x_y.c"])),
    ]
    assert find_collisions(rules) == [("$builddir/x_y.c.o", "x/y.c", "x_y.c")]


def test_collision_strict_mode_raises():
    scope = Scope()
    scope.push_artifact(_artifact("app", ArtifactKind.BINARY, ["a/b.c", "a_b.c"]))

    with pytest.raises(ObjectPathCollisionError):
        compile_scope(scope, strict_collisions=True)
