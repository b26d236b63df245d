"""
Package export orchestration.

Runs one export from request to written artifacts:

    1. ConfigVersion file (only when the request has a version)
    2. Target classification
    3. Usage-requirement accumulation (registers include dirs)
    4. <Project>Config.cmake
    5. Install plan, handed entry by entry to the installer
    6. Package registry registration
    7. XML manifest (only when a dump directory is configured)

Every failure aborts the export. Files written before the failure are left
as they are.
"""

import logging
from pathlib import Path
from typing import Optional

from ..output import TimedLogger, log, log_artifact, log_error, log_phase, log_warning
from .accumulator import accumulate
from .classifier import classify
from .collaborators import Installer, PackageRegistry, VersionCompatibility, VersionFileWriter
from .config_writer import ConfigArtifactWriter
from .install_planner import plan, version_file_entry
from .manifest import ManifestEmitter
from .models import ArtifactWriteError, ExportRequest, ExportResult, InstallEntry
from .project_context import ProjectContext
from .version_file import BasicVersionFileWriter

logger = logging.getLogger(__name__)

TOTAL_PHASES = 7


class PackageExporter:
    """
    Exports the targets of a project as a find_package()-loadable package.

    Holds the collaborators; every call to export() starts from fresh
    aggregated state, so one exporter can run several exports in sequence.
    """

    def __init__(
        self,
        installer: Installer,
        registry: PackageRegistry,
        version_writer: Optional[VersionFileWriter] = None,
        dump_directory: Optional[Path] = None,
    ):
        """
        Initialize the exporter.

        Args:
            installer: Receives the install entries
            registry: Package registry to record the export in
            version_writer: ConfigVersion writer (defaults to BasicVersionFileWriter)
            dump_directory: Directory for XML manifests (None = no manifest)
        """
        self.installer = installer
        self.registry = registry
        self.version_writer = version_writer if version_writer is not None else BasicVersionFileWriter()
        self.dump_directory = dump_directory
        self.config_writer = ConfigArtifactWriter()
        self.manifest_emitter = ManifestEmitter()

    def export(self, request: ExportRequest, context: ProjectContext) -> ExportResult:
        """Run a complete export.

        Args:
            request: Export arguments
            context: The exporting project

        Returns:
            ExportResult with the written files and the install plan

        Raises:
            ArtifactWriteError: If any generated file cannot be written
        """
        log(f"Exporting package: {context.project_name}")
        try:
            return self._run(request, context)
        except ArtifactWriteError as e:
            log_error(f"Export of {context.project_name} failed: {e}")
            raise

    def _run(self, request: ExportRequest, context: ProjectContext) -> ExportResult:
        name = context.project_name

        version_path: Optional[Path] = None
        version_entry: Optional[InstallEntry] = None
        if request.version:
            with TimedLogger(f"Writing {context.version_file_name}", phase=(1, TOTAL_PHASES)):
                version_path = context.binary_dir / context.version_file_name
                self.version_writer.emit_version_file(version_path, request.version, VersionCompatibility.SAME_MAJOR_VERSION)
                version_entry = version_file_entry(str(version_path))
                self.installer.install(version_entry)
                log_artifact("version", version_path)
        else:
            logger.debug(f"No version given for {name}, skipping {context.version_file_name}")

        with TimedLogger("Classifying targets", phase=(2, TOTAL_PHASES), verbose_only=True) as timed:
            classification = classify(context.resolve_targets(request.targets))
            timed.detail(f"libraries: {', '.join(classification.library_names) or '-'}")
            timed.detail(f"executables: {', '.join(classification.executable_names) or '-'}")
        for target in classification.dropped:
            log_warning(f"Skipping target {target.name}: not a library or executable")

        with TimedLogger("Accumulating usage requirements", phase=(3, TOTAL_PHASES), verbose_only=True):
            aggregated = accumulate(request, context, classification.shared_library_names)

        config_path = context.binary_dir / context.config_file_name
        with TimedLogger(f"Writing {context.config_file_name}", phase=(4, TOTAL_PHASES)):
            self.config_writer.write(aggregated, name, request.code, config_path)
            log_artifact("config", config_path)

        with TimedLogger("Planning installation", phase=(5, TOTAL_PHASES), verbose_only=True) as timed:
            entries = plan(classification.libraries, classification.executables, request.include_directories)
            for entry in entries:
                self.installer.install(entry)
            timed.detail(f"{len(entries)} install entries")

        log_phase(6, TOTAL_PHASES, f"Registering package {name}...", verbose_only=True)
        self.registry.register_package(name)

        manifest_path: Optional[Path] = None
        if self.dump_directory is not None:
            with TimedLogger("Writing manifest", phase=(7, TOTAL_PHASES)):
                document = self.manifest_emitter.emit(
                    name,
                    context.source_dir,
                    context.find_package_args,
                    request.dependencies,
                    request.include_directories,
                    classification.library_names,
                    classification.executable_names,
                )
                manifest_path = document.write(self.dump_directory)
                log_artifact("manifest", manifest_path)

        if version_entry is not None:
            entries.insert(0, version_entry)

        return ExportResult(
            project_name=name,
            config_path=config_path,
            classification=classification,
            install_entries=entries,
            version_path=version_path,
            manifest_path=manifest_path,
        )


def export_package(
    request: ExportRequest,
    context: ProjectContext,
    installer: Installer,
    registry: PackageRegistry,
    version_writer: Optional[VersionFileWriter] = None,
    dump_directory: Optional[Path] = None,
) -> ExportResult:
    """Export a package in one call. See PackageExporter.export()."""
    exporter = PackageExporter(installer, registry, version_writer=version_writer, dump_directory=dump_directory)
    return exporter.export(request, context)
