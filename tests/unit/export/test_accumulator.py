"""Unit tests for usage-requirement accumulation."""

from pkgexport.export.accumulator import accumulate, format_include_dir
from pkgexport.export.models import ExportRequest
from pkgexport.export.project_context import IncludeRegistry
from pkgexport.export.template import DeferredRef


def test_relative_include_dir_becomes_absolute(make_context):
    context = make_context()
    request = ExportRequest(include_directories=("./inc",))

    aggregated = accumulate(request, context)

    expected = (context.source_dir / "inc").as_posix() + "/"
    assert aggregated.include_dirs.entries() == [expected]
    assert "./inc" not in aggregated.include_dirs.entries()


def test_absolute_include_dir_is_kept(make_context, tmp_path):
    context = make_context()
    absolute = tmp_path / "elsewhere" / "include"
    request = ExportRequest(include_directories=(str(absolute),))

    aggregated = accumulate(request, context)

    assert aggregated.include_dirs.entries() == [absolute.as_posix() + "/"]


def test_format_include_dir_adds_single_trailing_slash(tmp_path):
    assert format_include_dir(tmp_path / "inc") == (tmp_path / "inc").as_posix() + "/"


def test_dependency_references_follow_own_entries(make_context):
    context = make_context()
    request = ExportRequest(
        dependencies=("Boost COMPONENTS filesystem", "ZLIB"),
        definitions=("-DFOO",),
        include_directories=("include",),
    )

    aggregated = accumulate(request, context, ["foo"])

    assert aggregated.find_package_statements == [
        "find_package(Boost COMPONENTS filesystem)",
        "find_package(ZLIB)",
    ]
    assert aggregated.definitions.entries() == [
        "-DFOO",
        DeferredRef("Boost_DEFINITIONS"),
        DeferredRef("ZLIB_DEFINITIONS"),
    ]
    assert aggregated.include_dirs.entries()[1:] == [
        DeferredRef("Boost_INCLUDE_DIRS"),
        DeferredRef("ZLIB_INCLUDE_DIRS"),
    ]
    assert aggregated.libraries.entries() == [
        "foo",
        DeferredRef("Boost_LIBRARIES"),
        DeferredRef("ZLIB_LIBRARIES"),
    ]


def test_duplicates_removed_after_concatenation(make_context):
    context = make_context()
    request = ExportRequest(
        dependencies=("Boost", "Boost COMPONENTS system"),
        definitions=("-DB", "-DA", "-DB"),
        include_directories=("inc", "./inc", "inc/"),
    )

    aggregated = accumulate(request, context, ["foo", "foo"])

    assert aggregated.definitions.entries() == ["-DB", "-DA", DeferredRef("Boost_DEFINITIONS")]
    assert len(aggregated.include_dirs.entries()) == 2
    assert aggregated.libraries.entries() == ["foo", DeferredRef("Boost_LIBRARIES")]
    # find_package statements are not deduplicated
    assert len(aggregated.find_package_statements) == 2


def test_include_dirs_registered_for_own_compilation(make_context):
    context = make_context()
    request = ExportRequest(include_directories=("include", "gen"))

    accumulate(request, context)

    assert context.include_registry.directories == (context.source_dir / "include", context.source_dir / "gen")


def test_registration_is_additive_across_exports(make_context):
    """A shared registry accumulates the include dirs of every export."""
    registry = IncludeRegistry()
    first = make_context("First", registry=registry)
    second = make_context("Second", registry=registry)

    accumulate(ExportRequest(include_directories=("a",)), first)
    accumulate(ExportRequest(include_directories=("b", "a")), second)

    assert registry.directories == (first.source_dir / "a", first.source_dir / "b")


def test_each_call_gets_fresh_attributes(make_context):
    context = make_context()
    request = ExportRequest(definitions=("-DX",), dependencies=("Dep",))

    first = accumulate(request, context)
    second = accumulate(request, context)

    assert first is not second
    assert first.definitions.entries() == second.definitions.entries()
    assert len(second.find_package_statements) == 1
