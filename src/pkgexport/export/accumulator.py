"""Usage-requirement accumulation.

Merges the exporting project's own definitions, include directories and
shared libraries with deferred references to the same attributes of every
declared dependency.

Design:
    Dependencies are re-resolved by find_package() each time the generated
    config file is loaded, so their attributes are captured as references
    (``${Boost_INCLUDE_DIRS}``), never as values. Deduplication of literal
    entries happens once, after all concatenation (Template.entries).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .models import Dependency, ExportRequest
from .project_context import IncludeRegistry, ProjectContext
from .template import Template

logger = logging.getLogger(__name__)

DEFINITIONS_SUFFIX = "_DEFINITIONS"
INCLUDE_DIRS_SUFFIX = "_INCLUDE_DIRS"
LIBRARIES_SUFFIX = "_LIBRARIES"


@dataclass
class AggregatedAttributes:
    """Usage requirements accumulated for one export.

    Owned by a single export call; never shared between calls.

    Attributes:
        find_package_statements: One find_package() call per dependency, in declaration order
        definitions: Own definitions, then each dependency's definitions reference
        include_dirs: Own absolute include dirs, then each dependency's include dirs reference
        libraries: Own shared libraries, then each dependency's libraries reference
    """

    find_package_statements: list[str] = field(default_factory=list)
    definitions: Template = field(default_factory=Template)
    include_dirs: Template = field(default_factory=Template)
    libraries: Template = field(default_factory=Template)

    def add_dependency(self, dependency: Dependency) -> None:
        self.find_package_statements.append(dependency.find_package_statement)
        self.definitions.add_deferred(dependency.name + DEFINITIONS_SUFFIX)
        self.include_dirs.add_deferred(dependency.name + INCLUDE_DIRS_SUFFIX)
        self.libraries.add_deferred(dependency.name + LIBRARIES_SUFFIX)


def format_include_dir(path: Path) -> str:
    """Render an absolute include directory the way the config file lists it."""
    text = path.as_posix()
    return text if text.endswith("/") else text + "/"


def register_include_directories(registry: IncludeRegistry, directories: Iterable[Path]) -> None:
    """Make the exported include directories visible to the project's own build."""
    directories = list(directories)
    if directories:
        logger.debug(f"Registering {len(directories)} include director(y/ies) for own compilation")
        registry.register(directories)


def accumulate(
    request: ExportRequest,
    context: ProjectContext,
    shared_library_names: Iterable[str] = (),
) -> AggregatedAttributes:
    """Build the aggregated usage requirements of an export.

    Also registers the request's include directories with the context's
    include registry (additive side effect).

    Args:
        request: The export request
        context: Project context (source dir for relative paths, include registry)
        shared_library_names: Shared library targets of this export, from classify()

    Returns:
        Fresh AggregatedAttributes for this export
    """
    aggregated = AggregatedAttributes()

    aggregated.definitions.add_literals(request.definitions)

    include_paths = [context.absolute_path(path) for path in request.include_directories]
    register_include_directories(context.include_registry, include_paths)
    aggregated.include_dirs.add_literals(format_include_dir(path) for path in include_paths)

    aggregated.libraries.add_literals(shared_library_names)

    for dependency in request.parsed_dependencies():
        logger.debug(f"Dependency '{dependency.name}' (find_package args: '{dependency.extra_args}')")
        aggregated.add_dependency(dependency)

    return aggregated
