"""Data models for package export.

Defines the value types that flow through an export:
- ExportRequest: Call-time arguments of one export (immutable)
- Dependency: A parsed dependency specification (name + forwarded arguments)
- Target / TargetKind: A build target resolved from the host build model
- InstallEntry: A single installation rule handed to the installer
- ExportResult: What an export produced

Design:
    ExportRequest flows from the CLI/config loader into export_package().
    Everything else is derived from it during one export and discarded
    afterwards, except the files written to disk.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .classifier import Classification


class ArtifactWriteError(OSError):
    """Raised when a generated artifact cannot be created or written."""

    pass


class TargetKind(Enum):
    """Kind of a build target, as reported by the host build model."""

    STATIC_LIBRARY = "STATIC_LIBRARY"
    SHARED_LIBRARY = "SHARED_LIBRARY"
    EXECUTABLE = "EXECUTABLE"
    OTHER = "OTHER"

    @classmethod
    def from_string(cls, value: str) -> "TargetKind":
        """Map a host target type string to a kind.

        Unrecognized types (INTERFACE_LIBRARY, UTILITY, ...) map to OTHER.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Target:
    """A build target with its kind."""

    name: str
    kind: TargetKind


@dataclass(frozen=True)
class Dependency:
    """A dependency specification split into its logical name and the rest.

    Attributes:
        spec: The original, free-form specification (e.g. "Boost COMPONENTS filesystem")
        name: Logical package name (text before the first whitespace)
        extra_args: Remaining text forwarded to find_package() (may be empty)
    """

    spec: str
    name: str
    extra_args: str = ""

    @classmethod
    def parse(cls, spec: str) -> "Dependency":
        """Split a specification on its first whitespace boundary.

        A string without whitespace is all name. A string starting with
        whitespace yields an empty name; this is not validated.
        """
        for index, char in enumerate(spec):
            if char.isspace():
                return cls(spec=spec, name=spec[:index], extra_args=spec[index + 1 :])
        return cls(spec=spec, name=spec)

    @property
    def find_package_statement(self) -> str:
        return f"find_package({self.spec})"


@dataclass(frozen=True)
class ExportRequest:
    """Arguments of a single export call.

    Attributes:
        targets: Names of the targets that make up the package
        dependencies: Dependency specifications, in declaration order
        include_directories: Directories consumers need in their include path
        definitions: Compile flags consumers need
        code: Raw code fragments appended to the generated config file
        version: Package version; a ConfigVersion file is generated when set
    """

    targets: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    include_directories: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()
    code: tuple[str, ...] = ()
    version: Optional[str] = None

    def parsed_dependencies(self) -> list[Dependency]:
        return [Dependency.parse(spec) for spec in self.dependencies]


class InstallKind(Enum):
    """What an install entry copies."""

    DIRECTORY = "DIRECTORY"
    FILE = "FILES"
    TARGET = "TARGETS"


class ArtifactSlot(Enum):
    """Output slot of a target (CMake's ARCHIVE/LIBRARY/RUNTIME)."""

    ARCHIVE = "ARCHIVE"
    LIBRARY = "LIBRARY"
    RUNTIME = "RUNTIME"


class Component(Enum):
    """Install component names. The values are part of the packaging contract."""

    DEV = "dev"
    BIN = "bin"
    DBG = "dbg"

    def __str__(self) -> str:
        return self.value


class Configuration(Enum):
    """Build configuration filter of an install entry."""

    RELEASE = "Release"
    DEBUG = "Debug"
    ANY = "*"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InstallEntry:
    """A single installation rule.

    Attributes:
        artifact: Source path (directories, files) or target name (targets)
        kind: What is installed
        destination: Destination relative to the install prefix
        component: Install component
        configuration: Build configuration this entry applies to
        slot: Target output slot (targets only)
        exclude_regex: Regex of file names to skip (directories only)
    """

    artifact: str
    kind: InstallKind
    destination: str
    component: Component
    configuration: Configuration = Configuration.ANY
    slot: Optional[ArtifactSlot] = None
    exclude_regex: Optional[str] = None


@dataclass
class ExportResult:
    """Files and plans produced by one export."""

    project_name: str
    config_path: Path
    classification: "Classification"
    install_entries: list[InstallEntry] = field(default_factory=list)
    version_path: Optional[Path] = None
    manifest_path: Optional[Path] = None
