"""ConfigVersion file generation.

Writes ``<Project>ConfigVersion.cmake`` files in the format of CMake's
write_basic_package_version_file(). find_package() loads the file with
PACKAGE_FIND_VERSION set to the requested version and reads back
PACKAGE_VERSION_COMPATIBLE / PACKAGE_VERSION_EXACT.
"""

import logging
from pathlib import Path

from .collaborators import VersionCompatibility
from .config_writer import write_text_artifact

logger = logging.getLogger(__name__)

_HEADER = """\
# This is a basic version file for the Config-mode of find_package().
# Generated by pkgexport ({compatibility}).

set(PACKAGE_VERSION "{version}")

"""

_SAME_MAJOR_VERSION = """\
if(PACKAGE_VERSION VERSION_LESS PACKAGE_FIND_VERSION)
  set(PACKAGE_VERSION_COMPATIBLE FALSE)
else()

  if("{version}" MATCHES "^([0-9]+)\\\\.")
    set(CVF_VERSION_MAJOR "${{CMAKE_MATCH_1}}")
  else()
    set(CVF_VERSION_MAJOR "{version}")
  endif()

  if(PACKAGE_FIND_VERSION_MAJOR STREQUAL CVF_VERSION_MAJOR)
    set(PACKAGE_VERSION_COMPATIBLE TRUE)
  else()
    set(PACKAGE_VERSION_COMPATIBLE FALSE)
  endif()

  if(PACKAGE_FIND_VERSION STREQUAL PACKAGE_VERSION)
    set(PACKAGE_VERSION_EXACT TRUE)
  endif()
endif()
"""

_ANY_NEWER_VERSION = """\
if(PACKAGE_VERSION VERSION_LESS PACKAGE_FIND_VERSION)
  set(PACKAGE_VERSION_COMPATIBLE FALSE)
else()
  set(PACKAGE_VERSION_COMPATIBLE TRUE)
  if(PACKAGE_FIND_VERSION STREQUAL PACKAGE_VERSION)
    set(PACKAGE_VERSION_EXACT TRUE)
  endif()
endif()
"""

_EXACT_VERSION = """\
if(PACKAGE_FIND_VERSION STREQUAL PACKAGE_VERSION)
  set(PACKAGE_VERSION_COMPATIBLE TRUE)
  set(PACKAGE_VERSION_EXACT TRUE)
else()
  set(PACKAGE_VERSION_COMPATIBLE FALSE)
endif()
"""

_BODIES: dict[VersionCompatibility, str] = {
    VersionCompatibility.SAME_MAJOR_VERSION: _SAME_MAJOR_VERSION,
    VersionCompatibility.ANY_NEWER_VERSION: _ANY_NEWER_VERSION,
    VersionCompatibility.EXACT_VERSION: _EXACT_VERSION,
}


def render_version_file(version: str, compatibility: VersionCompatibility) -> str:
    header = _HEADER.format(version=version, compatibility=compatibility.value)
    return header + _BODIES[compatibility].format(version=version)


class BasicVersionFileWriter:
    """Default VersionFileWriter."""

    def emit_version_file(self, path: Path, version: str, compatibility: VersionCompatibility) -> None:
        logger.debug(f"Writing version file {path} (version {version}, {compatibility.value})")
        write_text_artifact(path, render_version_file(version, compatibility))
