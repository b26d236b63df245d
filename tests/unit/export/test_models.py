"""Unit tests for export data models."""

from pkgexport.export.models import Dependency, ExportRequest, TargetKind


class TestDependencyParse:
    """Tests for splitting dependency specifications."""

    def test_name_and_extra_args(self):
        """The first token is the name, the rest is forwarded to find_package()."""
        dependency = Dependency.parse("Boost COMPONENTS filesystem")

        assert dependency.name == "Boost"
        assert dependency.extra_args == "COMPONENTS filesystem"
        assert dependency.find_package_statement == "find_package(Boost COMPONENTS filesystem)"

    def test_no_whitespace_is_all_name(self):
        dependency = Dependency.parse("ZLIB")

        assert dependency.name == "ZLIB"
        assert dependency.extra_args == ""
        assert dependency.find_package_statement == "find_package(ZLIB)"

    def test_leading_whitespace_gives_empty_name(self):
        """Not validated: a leading blank produces an empty name."""
        dependency = Dependency.parse(" Boost")

        assert dependency.name == ""
        assert dependency.extra_args == "Boost"

    def test_splits_on_first_whitespace_only(self):
        dependency = Dependency.parse("Qt5\tCOMPONENTS  Core Gui")

        assert dependency.name == "Qt5"
        assert dependency.extra_args == "COMPONENTS  Core Gui"

    def test_request_parses_in_declaration_order(self):
        request = ExportRequest(dependencies=("Boost 1.48", "ZLIB", "PNG REQUIRED"))

        assert [d.name for d in request.parsed_dependencies()] == ["Boost", "ZLIB", "PNG"]


class TestTargetKind:
    """Tests for mapping host target types."""

    def test_known_types(self):
        assert TargetKind.from_string("SHARED_LIBRARY") is TargetKind.SHARED_LIBRARY
        assert TargetKind.from_string("static_library") is TargetKind.STATIC_LIBRARY
        assert TargetKind.from_string(" EXECUTABLE ") is TargetKind.EXECUTABLE

    def test_unknown_types_are_other(self):
        assert TargetKind.from_string("INTERFACE_LIBRARY") is TargetKind.OTHER
        assert TargetKind.from_string("UTILITY") is TargetKind.OTHER
        assert TargetKind.from_string("") is TargetKind.OTHER
