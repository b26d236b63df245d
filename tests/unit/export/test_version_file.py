"""Unit tests for ConfigVersion file generation."""

from pkgexport.export.collaborators import VersionCompatibility, VersionFileWriter
from pkgexport.export.version_file import BasicVersionFileWriter, render_version_file


def test_same_major_version_file():
    text = render_version_file("1.2.3", VersionCompatibility.SAME_MAJOR_VERSION)

    assert 'set(PACKAGE_VERSION "1.2.3")' in text
    assert 'if("1.2.3" MATCHES "^([0-9]+)\\\\.")' in text
    assert 'set(CVF_VERSION_MAJOR "${CMAKE_MATCH_1}")' in text
    assert "if(PACKAGE_FIND_VERSION_MAJOR STREQUAL CVF_VERSION_MAJOR)" in text
    assert "SameMajorVersion" in text


def test_any_newer_version_file():
    text = render_version_file("2.0", VersionCompatibility.ANY_NEWER_VERSION)

    assert "CVF_VERSION_MAJOR" not in text
    assert "if(PACKAGE_VERSION VERSION_LESS PACKAGE_FIND_VERSION)" in text


def test_exact_version_file():
    text = render_version_file("2.0", VersionCompatibility.EXACT_VERSION)

    assert "VERSION_LESS" not in text
    assert "set(PACKAGE_VERSION_EXACT TRUE)" in text


def test_writer_writes_file(tmp_path):
    path = tmp_path / "build" / "FooConfigVersion.cmake"

    BasicVersionFileWriter().emit_version_file(path, "0.9.1", VersionCompatibility.SAME_MAJOR_VERSION)

    assert 'set(PACKAGE_VERSION "0.9.1")' in path.read_text(encoding="utf-8")


def test_writer_satisfies_protocol():
    assert isinstance(BasicVersionFileWriter(), VersionFileWriter)
