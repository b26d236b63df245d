"""Pytest configuration and fixtures for pkgexport tests."""

import sys
from pathlib import Path

import pytest

from pkgexport.export import IncludeRegistry, ProjectContext, TargetKind
from pkgexport.output import set_output_stream, set_verbose


@pytest.fixture(autouse=True)
def _console_output():
    """Route pkgexport console output to the stream pytest is capturing right now.

    The output module keeps a reference to a stream; the one captured at
    import time may be closed by the time a later test runs.
    """
    set_output_stream(sys.stdout)
    set_verbose(True)
    yield
    set_output_stream(sys.__stdout__)


@pytest.fixture
def make_context(tmp_path: Path):
    """Factory for a ProjectContext rooted in tmp_path.

    Usage:
        context = make_context("Foo", foo=TargetKind.SHARED_LIBRARY)
    """

    def _make(project_name: str = "Foo", registry: IncludeRegistry | None = None, **targets: TargetKind) -> ProjectContext:
        source_dir = tmp_path / "src"
        binary_dir = tmp_path / "build"
        source_dir.mkdir(exist_ok=True)
        return ProjectContext(
            project_name=project_name,
            source_dir=source_dir,
            binary_dir=binary_dir,
            targets=dict(targets),
            include_registry=registry if registry is not None else IncludeRegistry(),
        )

    return _make
