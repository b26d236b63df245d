"""Unit tests for installation planning."""

from pkgexport.export.install_planner import plan, version_file_entry
from pkgexport.export.models import ArtifactSlot, Component, Configuration, InstallKind, Target, TargetKind

SHARED = Target("foo", TargetKind.SHARED_LIBRARY)
STATIC = Target("foo_static", TargetKind.STATIC_LIBRARY)
TOOL = Target("footool", TargetKind.EXECUTABLE)


def _rows(entries):
    return [(e.artifact, e.slot, e.destination, e.component, e.configuration) for e in entries]


def test_include_directory_entry():
    entries = plan([], [], ["include"])

    assert len(entries) == 1
    entry = entries[0]
    assert entry.artifact == "include/"
    assert entry.kind is InstallKind.DIRECTORY
    assert entry.destination == "include"
    assert entry.component is Component.DEV
    assert entry.configuration is Configuration.RELEASE
    assert entry.exclude_regex == "[.]in$"


def test_release_slots_for_every_target():
    entries = plan([SHARED], [TOOL], [])
    release = [e for e in entries if e.configuration is Configuration.RELEASE]

    assert _rows(release) == [
        ("foo", ArtifactSlot.ARCHIVE, "lib", Component.DEV, Configuration.RELEASE),
        ("foo", ArtifactSlot.LIBRARY, "lib", Component.BIN, Configuration.RELEASE),
        ("foo", ArtifactSlot.RUNTIME, "bin", Component.BIN, Configuration.RELEASE),
        ("footool", ArtifactSlot.ARCHIVE, "lib", Component.DEV, Configuration.RELEASE),
        ("footool", ArtifactSlot.LIBRARY, "lib", Component.BIN, Configuration.RELEASE),
        ("footool", ArtifactSlot.RUNTIME, "bin", Component.BIN, Configuration.RELEASE),
    ]


def test_debug_slots_for_libraries_only():
    entries = plan([SHARED, STATIC], [TOOL], [])
    debug = [e for e in entries if e.configuration is Configuration.DEBUG]

    assert {e.artifact for e in debug} == {"foo", "foo_static"}
    assert all(e.component is Component.DBG for e in debug)
    assert [(e.slot, e.destination) for e in debug[:3]] == [
        (ArtifactSlot.ARCHIVE, "lib"),
        (ArtifactSlot.LIBRARY, "lib"),
        (ArtifactSlot.RUNTIME, "bin"),
    ]


def test_executables_never_installed_for_debug():
    entries = plan([], [TOOL, Target("other_tool", TargetKind.EXECUTABLE)], [])

    assert not [e for e in entries if e.configuration is Configuration.DEBUG]


def test_component_and_configuration_names_match_packaging_contract():
    entries = plan([SHARED], [TOOL], ["include"])

    assert {e.component.value for e in entries} == {"dev", "bin", "dbg"}
    assert {e.configuration.value for e in entries} == {"Release", "Debug"}


def test_plan_is_stable():
    first = plan([SHARED, STATIC], [TOOL], ["include", "gen"])
    second = plan([SHARED, STATIC], [TOOL], ["include", "gen"])

    assert first == second
    assert [e.artifact for e in first[:2]] == ["include/", "gen/"]
    assert len(first) == 2 + 3 * 3 + 2 * 3


def test_duplicate_targets_give_duplicate_entries():
    entries = plan([SHARED, SHARED], [], [])

    assert len(entries) == 12


def test_version_file_entry_has_no_configuration_filter():
    entry = version_file_entry("/build/FooConfigVersion.cmake")

    assert entry.kind is InstallKind.FILE
    assert entry.destination == "."
    assert entry.component is Component.DEV
    assert entry.configuration is Configuration.ANY
