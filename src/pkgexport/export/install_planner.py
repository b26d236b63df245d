"""Installation planning.

Derives the install rules of an export:

    headers      include/  dev  Release   (template sources "*.in" excluded)
    ARCHIVE      lib/      dev  Release   libraries + executables
    LIBRARY      lib/      bin  Release   libraries + executables
    RUNTIME      bin/      bin  Release   libraries + executables
    ARCHIVE      lib/      dbg  Debug     libraries only
    LIBRARY      lib/      dbg  Debug     libraries only
    RUNTIME      bin/      dbg  Debug     libraries only

Executables have no Debug entries.
"""

from typing import Iterable, Sequence

from .models import ArtifactSlot, Component, Configuration, InstallEntry, InstallKind, Target

INCLUDE_DESTINATION = "include"
TEMPLATE_SOURCE_REGEX = "[.]in$"

# (slot, destination, component) per configuration
RELEASE_SLOTS: tuple[tuple[ArtifactSlot, str, Component], ...] = (
    (ArtifactSlot.ARCHIVE, "lib", Component.DEV),
    (ArtifactSlot.LIBRARY, "lib", Component.BIN),
    (ArtifactSlot.RUNTIME, "bin", Component.BIN),
)
DEBUG_SLOTS: tuple[tuple[ArtifactSlot, str, Component], ...] = (
    (ArtifactSlot.ARCHIVE, "lib", Component.DBG),
    (ArtifactSlot.LIBRARY, "lib", Component.DBG),
    (ArtifactSlot.RUNTIME, "bin", Component.DBG),
)


def plan_headers(include_directories: Iterable[str]) -> list[InstallEntry]:
    """One entry per include directory; its contents land directly in include/."""
    return [
        InstallEntry(
            artifact=directory.rstrip("/") + "/",
            kind=InstallKind.DIRECTORY,
            destination=INCLUDE_DESTINATION,
            component=Component.DEV,
            configuration=Configuration.RELEASE,
            exclude_regex=TEMPLATE_SOURCE_REGEX,
        )
        for directory in include_directories
    ]


def plan_targets(
    targets: Iterable[Target],
    configuration: Configuration,
    slots: Sequence[tuple[ArtifactSlot, str, Component]],
) -> list[InstallEntry]:
    return [
        InstallEntry(
            artifact=target.name,
            kind=InstallKind.TARGET,
            destination=destination,
            component=component,
            configuration=configuration,
            slot=slot,
        )
        for target in targets
        for slot, destination, component in slots
    ]


def plan(
    libraries: Sequence[Target],
    executables: Sequence[Target],
    include_directories: Iterable[str],
) -> list[InstallEntry]:
    """Compute the install entries of an export.

    Args:
        libraries: Static and shared libraries, from classify()
        executables: Executables, from classify()
        include_directories: Include directories as given in the request

    Returns:
        Install entries in a stable order: headers, Release targets, Debug libraries
    """
    entries = plan_headers(include_directories)
    entries.extend(plan_targets([*libraries, *executables], Configuration.RELEASE, RELEASE_SLOTS))
    entries.extend(plan_targets(libraries, Configuration.DEBUG, DEBUG_SLOTS))
    return entries


def version_file_entry(path: str) -> InstallEntry:
    """Install entry of a generated ConfigVersion file (dev, every configuration)."""
    return InstallEntry(
        artifact=path,
        kind=InstallKind.FILE,
        destination=".",
        component=Component.DEV,
    )
