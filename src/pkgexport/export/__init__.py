"""Package export: config file, version file, install plan and manifest generation.

Public API:
    export_package / PackageExporter: Run a complete export
    ExportRequest, ProjectContext: Inputs of an export
    accumulate, classify, plan: The individual export stages
"""

from .accumulator import AggregatedAttributes, accumulate
from .classifier import Classification, classify
from .collaborators import (
    Installer,
    NullRegistry,
    PackageRegistry,
    RecordingInstaller,
    VersionCompatibility,
    VersionFileWriter,
)
from .config_writer import ConfigArtifactWriter
from .exporter import PackageExporter, export_package
from .install_planner import plan
from .install_script import InstallScript
from .manifest import ManifestDocument, ManifestEmitter, read_manifest
from .models import (
    ArtifactWriteError,
    Dependency,
    ExportRequest,
    ExportResult,
    InstallEntry,
    Target,
    TargetKind,
)
from .project_context import IncludeRegistry, ProjectContext
from .registry import UserPackageRegistry
from .template import DeferredRef, Template
from .version_file import BasicVersionFileWriter

__all__ = [
    "AggregatedAttributes",
    "ArtifactWriteError",
    "BasicVersionFileWriter",
    "Classification",
    "ConfigArtifactWriter",
    "DeferredRef",
    "Dependency",
    "ExportRequest",
    "ExportResult",
    "IncludeRegistry",
    "InstallEntry",
    "InstallScript",
    "Installer",
    "ManifestDocument",
    "ManifestEmitter",
    "NullRegistry",
    "PackageExporter",
    "PackageRegistry",
    "ProjectContext",
    "RecordingInstaller",
    "Target",
    "TargetKind",
    "Template",
    "UserPackageRegistry",
    "VersionCompatibility",
    "VersionFileWriter",
    "accumulate",
    "classify",
    "export_package",
    "plan",
    "read_manifest",
]
