"""
Command-line interface for pkgexport.

This module provides the `pkgexport` CLI tool:

    pkgexport export request.json          # Write FooConfig.cmake & co.
    pkgexport plan request.json            # Show the install plan only
    pkgexport manifest dump/Foo.xml        # Show a written manifest
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pkgexport import __version__
from pkgexport.config import RequestConfigError, load_request_file, load_settings
from pkgexport.export import (
    ArtifactWriteError,
    ExportResult,
    InstallEntry,
    InstallScript,
    NullRegistry,
    PackageRegistry,
    UserPackageRegistry,
    classify,
    export_package,
    plan,
    read_manifest,
)
from pkgexport.output import init_timer, set_output_stream, set_verbose

console = Console()


@dataclass
class ExportArgs:
    """Arguments for the export command."""

    request_file: Path
    dump_dir: Optional[Path] = None
    install_script: bool = False
    register: bool = True
    verbose: bool = False


@dataclass
class PlanArgs:
    """Arguments for the plan command."""

    request_file: Path


@dataclass
class ManifestArgs:
    """Arguments for the manifest command."""

    manifest_file: Path


def render_plan_table(entries: Sequence[InstallEntry], title: str) -> Table:
    """Build a Rich table with one row per install entry."""
    table = Table(title=title, show_lines=False)
    table.add_column("Artifact", style="bold", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Slot", no_wrap=True)
    table.add_column("Destination", no_wrap=True)
    table.add_column("Component", no_wrap=True)
    table.add_column("Configuration", no_wrap=True)
    for entry in entries:
        table.add_row(
            escape(entry.artifact),
            entry.kind.value,
            entry.slot.value if entry.slot is not None else "",
            escape(entry.destination),
            entry.component.value,
            entry.configuration.value,
        )
    return table


def _print_result(result: ExportResult) -> None:
    console.print()
    console.print(f"[bold green]✓ Exported {escape(result.project_name)}[/bold green]")
    console.print(f"  Config:   {escape(str(result.config_path))}")
    if result.version_path is not None:
        console.print(f"  Version:  {escape(str(result.version_path))}")
    if result.manifest_path is not None:
        console.print(f"  Manifest: {escape(str(result.manifest_path))}")
    console.print(f"  Install entries: {len(result.install_entries)}")


def export_command(args: ExportArgs) -> int:
    """Run an export described by a request file.

    Examples:
        pkgexport export request.json
        pkgexport export request.json --dump-dir out/   # Also write Foo.xml
        pkgexport export request.json --install-script  # Also write FooInstall.cmake
        pkgexport export request.json --no-register     # Skip package registry
    """
    set_verbose(args.verbose)
    init_timer()

    try:
        request, context = load_request_file(args.request_file)
        settings = load_settings()

        dump_dir = args.dump_dir if args.dump_dir is not None else settings.dump_directory
        registry: PackageRegistry
        if args.register and settings.register:
            registry = UserPackageRegistry(context.binary_dir, settings.registry_root)
        else:
            registry = NullRegistry()

        installer = InstallScript()
        result = export_package(request, context, installer, registry, dump_directory=dump_dir)

        if args.install_script:
            script_path = context.binary_dir / f"{context.project_name}Install.cmake"
            installer.write(script_path)
            console.print(f"Install script: {escape(str(script_path))}")

        _print_result(result)
        return 0

    except RequestConfigError as e:
        console.print(f"[bold red]✗ Invalid request:[/bold red] {escape(str(e))}")
        return 1

    except ArtifactWriteError as e:
        console.print(f"[bold red]✗ Export failed:[/bold red] {escape(str(e))}")
        return 1

    except KeyboardInterrupt:
        console.print("[bold yellow]✗ Export interrupted[/bold yellow]")
        return 130


def plan_command(args: PlanArgs) -> int:
    """Print the install plan of a request without writing anything."""
    try:
        request, context = load_request_file(args.request_file)
    except RequestConfigError as e:
        console.print(f"[bold red]✗ Invalid request:[/bold red] {escape(str(e))}")
        return 1

    classification = classify(context.resolve_targets(request.targets))
    entries = plan(classification.libraries, classification.executables, request.include_directories)
    console.print(render_plan_table(entries, f"Install plan: {escape(context.project_name)}"))
    for target in classification.dropped:
        console.print(f"[yellow]Skipped target {escape(target.name)} (not a library or executable)[/yellow]")
    return 0


def manifest_command(args: ManifestArgs) -> int:
    """Print the content of a written manifest."""
    try:
        document = read_manifest(args.manifest_file)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]✗ Cannot read manifest:[/bold red] {escape(str(e))}")
        return 1

    console.print(f"[bold]{escape(document.name)}[/bold] ({escape(document.source_directory)})")
    for args_list in document.find_package_args:
        console.print(f"  find_package({escape(' '.join(args_list))})")
    for label, values in (
        ("Depends", document.dependencies),
        ("Include directories", document.include_directories),
        ("Libraries", document.libraries),
        ("Executables", document.executables),
    ):
        if values:
            console.print(f"  {label}: {escape(', '.join(values))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgexport",
        description="pkgexport - CMake package export descriptor generator",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pkgexport {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        help="Write the package config, version file and manifest",
    )
    export_parser.add_argument(
        "request_file",
        type=Path,
        help="JSON request file",
    )
    export_parser.add_argument(
        "--dump-dir",
        type=Path,
        default=None,
        help="Directory for the XML manifest (default: $PKGEXPORT_DUMP_DIRECTORY)",
    )
    export_parser.add_argument(
        "--install-script",
        action="store_true",
        help="Also write <Project>Install.cmake with the install() commands",
    )
    export_parser.add_argument(
        "--no-register",
        action="store_true",
        help="Do not record the package in the package registry",
    )
    export_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Plan command
    plan_parser = subparsers.add_parser(
        "plan",
        help="Show the install plan of a request",
    )
    plan_parser.add_argument(
        "request_file",
        type=Path,
        help="JSON request file",
    )

    # Manifest command
    manifest_parser = subparsers.add_parser(
        "manifest",
        help="Show a written XML manifest",
    )
    manifest_parser.add_argument(
        "manifest_file",
        type=Path,
        help="Manifest file (<Project>.xml)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """pkgexport - CMake package export descriptor generator."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    set_output_stream(sys.stdout)

    if parsed_args.command == "export":
        if parsed_args.verbose:
            logging.getLogger("pkgexport").setLevel(logging.DEBUG)
        exit_code = export_command(
            ExportArgs(
                request_file=parsed_args.request_file,
                dump_dir=parsed_args.dump_dir,
                install_script=parsed_args.install_script,
                register=not parsed_args.no_register,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "plan":
        exit_code = plan_command(PlanArgs(request_file=parsed_args.request_file))
    else:
        exit_code = manifest_command(ManifestArgs(manifest_file=parsed_args.manifest_file))

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
