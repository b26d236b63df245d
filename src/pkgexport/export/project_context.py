"""Project Context - what the host build model knows about the exporting project.

This module defines:
- IncludeRegistry: Include directories registered for the project's own compilation
- ProjectContext: Project name, directories, target kinds and registry

Design:
    The exporter never inspects a real build tree. Everything it needs from
    the host build system (target kinds, the directories to write into, the
    arguments the project itself was found with) comes through ProjectContext.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .models import Target, TargetKind


class IncludeRegistry:
    """Include directories seen by the project's own compilation.

    Registration is additive: directories are never removed, and registering
    a directory twice keeps a single entry. A registry may be shared by
    several contexts, in which case every export sees all registrations.
    There is no per-target scoping.
    """

    def __init__(self) -> None:
        self._directories: list[Path] = []

    def register(self, directories: Iterable[Path]) -> None:
        for directory in directories:
            if directory not in self._directories:
                self._directories.append(directory)

    @property
    def directories(self) -> tuple[Path, ...]:
        return tuple(self._directories)

    def __contains__(self, directory: object) -> bool:
        return directory in self._directories

    def __len__(self) -> int:
        return len(self._directories)


@dataclass
class ProjectContext:
    """The exporting project as seen by the host build model.

    Attributes:
        project_name: Package name (prefix of all generated variables and files)
        source_dir: Project source directory (relative include dirs resolve here)
        binary_dir: Directory receiving the generated files
        targets: Target name -> kind, for every target the project defines
        find_package_args: Argument lists the project itself was found with
        include_registry: Include directories registered for own compilation
    """

    project_name: str
    source_dir: Path
    binary_dir: Path
    targets: dict[str, TargetKind] = field(default_factory=dict)
    find_package_args: list[list[str]] = field(default_factory=list)
    include_registry: IncludeRegistry = field(default_factory=IncludeRegistry)

    def resolve_target(self, name: str) -> Target:
        """Look up a target; names the build model does not know are OTHER."""
        return Target(name=name, kind=self.targets.get(name, TargetKind.OTHER))

    def resolve_targets(self, names: Iterable[str]) -> list[Target]:
        return [self.resolve_target(name) for name in names]

    def absolute_path(self, path: str) -> Path:
        """Resolve a possibly relative path against the source directory."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.source_dir.absolute() / candidate
        # Collapse "." and ".." without touching the filesystem
        return Path(os.path.normpath(candidate))

    @property
    def config_file_name(self) -> str:
        return f"{self.project_name}Config.cmake"

    @property
    def version_file_name(self) -> str:
        return f"{self.project_name}ConfigVersion.cmake"
