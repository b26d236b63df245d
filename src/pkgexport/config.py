"""Configuration loading for pkgexport.

Two sources of configuration:

Request files (JSON) describe one export:

    {
      "project": {
        "name": "Foo",
        "source_dir": ".",
        "binary_dir": "build",
        "targets": {"foo": "SHARED_LIBRARY", "foo_tool": "EXECUTABLE"},
        "find_package_args": [["Foo", "REQUIRED"]]
      },
      "export": {
        "targets": ["foo", "foo_tool"],
        "depends": ["Boost COMPONENTS filesystem"],
        "include_directories": ["include"],
        "definitions": ["-DFOO_DYN_LINK"],
        "code": ["set(Foo_FOUND TRUE)"],
        "version": "1.2.3"
      }
    }

Relative source_dir/binary_dir resolve against the request file's directory.

Environment variables configure the process:
    PKGEXPORT_DUMP_DIRECTORY  Directory for XML manifests (unset = no manifest)
    PKGEXPORT_REGISTRY_DIR    Package registry root (default ~/.cmake/packages)
    PKGEXPORT_NO_REGISTRY     "1" to skip package registration
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .export.models import ExportRequest, TargetKind
from .export.project_context import IncludeRegistry, ProjectContext
from .export.registry import get_registry_root


class RequestConfigError(ValueError):
    """Raised when a request file is missing, unreadable or malformed."""

    pass


@dataclass(frozen=True)
class Settings:
    """Process-level settings read from the environment.

    Attributes:
        dump_directory: Directory receiving XML manifests, or None
        registry_root: Root of the package registry
        register: Whether exports are recorded in the registry
    """

    dump_directory: Optional[Path]
    registry_root: Path
    register: bool = True


def load_settings() -> Settings:
    """Read Settings from the environment."""
    dump_env = os.environ.get("PKGEXPORT_DUMP_DIRECTORY")
    return Settings(
        dump_directory=Path(dump_env).resolve() if dump_env else None,
        registry_root=get_registry_root(),
        register=os.environ.get("PKGEXPORT_NO_REGISTRY") != "1",
    )


def _string_list(section: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    value = section.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RequestConfigError(f"'{where}.{key}' must be a list of strings")
    return tuple(value)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key)
    if not isinstance(section, dict):
        raise RequestConfigError(f"'{key}' section missing or not an object")
    return section


def parse_request(data: dict[str, Any]) -> ExportRequest:
    """Build an ExportRequest from the "export" section of a request document."""
    section = _section(data, "export")
    version = section.get("version")
    if version is not None and not isinstance(version, str):
        raise RequestConfigError("'export.version' must be a string")
    return ExportRequest(
        targets=_string_list(section, "targets", "export"),
        dependencies=_string_list(section, "depends", "export"),
        include_directories=_string_list(section, "include_directories", "export"),
        definitions=_string_list(section, "definitions", "export"),
        code=_string_list(section, "code", "export"),
        version=version or None,
    )


def parse_project(data: dict[str, Any], base_dir: Path, include_registry: Optional[IncludeRegistry] = None) -> ProjectContext:
    """Build a ProjectContext from the "project" section of a request document.

    Args:
        data: Request document
        base_dir: Directory relative paths resolve against
        include_registry: Registry to share between contexts (new one if None)
    """
    section = _section(data, "project")

    name = section.get("name")
    if not isinstance(name, str) or not name:
        raise RequestConfigError("'project.name' must be a non-empty string")

    targets = section.get("targets", {})
    if not isinstance(targets, dict) or not all(isinstance(kind, str) for kind in targets.values()):
        raise RequestConfigError("'project.targets' must map target names to target types")

    find_package_args = section.get("find_package_args", [])
    if not isinstance(find_package_args, list) or not all(
        isinstance(args, list) and all(isinstance(arg, str) for arg in args) for args in find_package_args
    ):
        raise RequestConfigError("'project.find_package_args' must be a list of string lists")

    for key in ("source_dir", "binary_dir"):
        if not isinstance(section.get(key, "."), str):
            raise RequestConfigError(f"'project.{key}' must be a string")

    source_dir = base_dir / section.get("source_dir", ".")
    binary_dir = base_dir / section.get("binary_dir", ".")

    return ProjectContext(
        project_name=name,
        source_dir=source_dir.resolve(),
        binary_dir=binary_dir.resolve(),
        targets={target: TargetKind.from_string(kind) for target, kind in targets.items()},
        find_package_args=[list(args) for args in find_package_args],
        include_registry=include_registry if include_registry is not None else IncludeRegistry(),
    )


def load_request_file(path: Path, include_registry: Optional[IncludeRegistry] = None) -> tuple[ExportRequest, ProjectContext]:
    """Load an export request and its project context from a JSON file.

    Args:
        path: Request file
        include_registry: Registry to share between contexts (new one if None)

    Returns:
        (request, context)

    Raises:
        RequestConfigError: If the file cannot be read or is malformed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise RequestConfigError(f"Request file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise RequestConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise RequestConfigError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise RequestConfigError(f"{path}: top level must be an object")

    base_dir = path.resolve().parent
    return parse_request(data), parse_project(data, base_dir, include_registry)
