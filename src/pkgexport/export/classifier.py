"""Target classification.

Partitions the targets of an export into libraries and executables, and
separately tracks the shared libraries, which are the only targets
advertised to consumers through ``<Project>_LIBRARIES``.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .models import Target, TargetKind

logger = logging.getLogger(__name__)


@dataclass
class Classification:
    """Result of classifying the targets of one export.

    Attributes:
        libraries: Static and shared libraries, in input order
        executables: Executables, in input order
        shared_library_names: Names of the shared libraries only
        dropped: Targets of any other kind (not installed, not exported)
    """

    libraries: list[Target] = field(default_factory=list)
    executables: list[Target] = field(default_factory=list)
    shared_library_names: list[str] = field(default_factory=list)
    dropped: list[Target] = field(default_factory=list)

    @property
    def library_names(self) -> list[str]:
        return [t.name for t in self.libraries]

    @property
    def executable_names(self) -> list[str]:
        return [t.name for t in self.executables]


def classify(targets: Iterable[Target]) -> Classification:
    """Partition targets by kind.

    Static libraries are installed but not added to the shared library
    list; consumers link them through the target list itself.

    Args:
        targets: Resolved targets, in request order

    Returns:
        Classification of the targets
    """
    result = Classification()
    for target in targets:
        if target.kind is TargetKind.SHARED_LIBRARY:
            result.shared_library_names.append(target.name)
            result.libraries.append(target)
        elif target.kind is TargetKind.STATIC_LIBRARY:
            result.libraries.append(target)
        elif target.kind is TargetKind.EXECUTABLE:
            result.executables.append(target)
        else:
            logger.warning(f"Target '{target.name}' is neither a library nor an executable, not exporting it")
            result.dropped.append(target)
    return result
