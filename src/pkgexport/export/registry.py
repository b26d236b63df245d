"""CMake user package registry.

find_package() searches the user package registry for build trees of
packages that were exported but not installed. Each registration is a file

    <registry-root>/<Package>/<md5 of the build directory>

whose content is the build directory containing ``<Package>Config.cmake``.
Registering the same build directory twice rewrites the same file.
"""

import hashlib
import logging
import os
from pathlib import Path

from .config_writer import write_text_artifact

logger = logging.getLogger(__name__)


def get_registry_root() -> Path:
    """Get the registry root directory, respecting PKGEXPORT_REGISTRY_DIR.

    Returns:
        Path to the registry root (default ~/.cmake/packages)
    """
    registry_env = os.environ.get("PKGEXPORT_REGISTRY_DIR")
    if registry_env:
        return Path(registry_env).resolve()
    return Path.home() / ".cmake" / "packages"


def registry_entry_name(build_dir: Path) -> str:
    return hashlib.md5(str(build_dir).encode("utf-8")).hexdigest()


class UserPackageRegistry:
    """Registers a package's build directory in the user package registry."""

    def __init__(self, build_dir: Path, registry_root: Path | None = None):
        """Initialize the registry.

        Args:
            build_dir: Directory holding the generated config file
            registry_root: Registry root (defaults to get_registry_root())
        """
        self.build_dir = build_dir.resolve()
        self.registry_root = registry_root if registry_root is not None else get_registry_root()

    def entry_path(self, name: str) -> Path:
        return self.registry_root / name / registry_entry_name(self.build_dir)

    def register_package(self, name: str) -> None:
        """Record the build directory for package ``name``.

        Raises:
            ArtifactWriteError: If the registry entry cannot be written
        """
        path = self.entry_path(name)
        logger.debug(f"Registering {name} -> {self.build_dir} in {path}")
        write_text_artifact(path, f"{self.build_dir}\n")
