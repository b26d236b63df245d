"""Unit tests for the project context and include registry."""

from pathlib import Path

from pkgexport.export.models import TargetKind
from pkgexport.export.project_context import IncludeRegistry


def test_unknown_targets_resolve_to_other(make_context):
    context = make_context(foo=TargetKind.SHARED_LIBRARY)

    assert context.resolve_target("foo").kind is TargetKind.SHARED_LIBRARY
    assert context.resolve_target("missing").kind is TargetKind.OTHER


def test_absolute_path_normalizes_relative_paths(make_context):
    context = make_context()

    assert context.absolute_path("./inc") == context.source_dir / "inc"
    assert context.absolute_path("a/../b") == context.source_dir / "b"


def test_absolute_path_keeps_absolute_paths(make_context, tmp_path):
    context = make_context()

    assert context.absolute_path(str(tmp_path / "x")) == tmp_path / "x"


def test_file_names(make_context):
    context = make_context("Foo")

    assert context.config_file_name == "FooConfig.cmake"
    assert context.version_file_name == "FooConfigVersion.cmake"


def test_registry_never_removes_or_duplicates():
    registry = IncludeRegistry()

    registry.register([Path("/a"), Path("/b")])
    registry.register([Path("/a")])
    registry.register([])

    assert registry.directories == (Path("/a"), Path("/b"))
    assert Path("/b") in registry
    assert len(registry) == 2
