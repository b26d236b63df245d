"""Collaborator protocols of the exporter.

The exporter hands work it does not own to three collaborators:
- Installer: receives every install entry of the export
- PackageRegistry: records the exported package in the host's registry
- VersionFileWriter: produces the ConfigVersion file when a version is given

Default implementations live in install_script.py, registry.py and
version_file.py. The null/recording implementations below are for tests and
dry runs.
"""

from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from .models import InstallEntry


class VersionCompatibility(Enum):
    """Version compatibility policy of a ConfigVersion file."""

    SAME_MAJOR_VERSION = "SameMajorVersion"
    ANY_NEWER_VERSION = "AnyNewerVersion"
    EXACT_VERSION = "ExactVersion"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Installer(Protocol):
    """Receives the install entries of an export, in plan order."""

    def install(self, entry: InstallEntry) -> None: ...


@runtime_checkable
class PackageRegistry(Protocol):
    """Host package registry."""

    def register_package(self, name: str) -> None: ...


@runtime_checkable
class VersionFileWriter(Protocol):
    """Writes a version-compatibility file for a package."""

    def emit_version_file(self, path: Path, version: str, compatibility: VersionCompatibility) -> None:
        """Write the version file.

        Args:
            path: Destination file
            version: Package version
            compatibility: Which requested versions the package satisfies

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        ...


class RecordingInstaller:
    """Installer that only remembers what it was given."""

    def __init__(self) -> None:
        self.entries: list[InstallEntry] = []

    def install(self, entry: InstallEntry) -> None:
        self.entries.append(entry)


class NullRegistry:
    """Registry that records registrations in memory and writes nothing."""

    def __init__(self) -> None:
        self.registered: list[str] = []

    def register_package(self, name: str) -> None:
        self.registered.append(name)
