"""XML project manifest.

When a dump directory is configured, every export also writes
``<dump-directory>/<Project>.xml`` describing the package for external
discovery tooling:

    <?xml version='1.0' ?>
    <cmake-project>
      <name>Foo</name>
      <source-directory>/src/foo</source-directory>
      <find-package>
        <arg>Foo</arg>
        <arg>REQUIRED</arg>
      </find-package>
      <depends>
        <dependency>Boost COMPONENTS filesystem</dependency>
      </depends>
      <libraries>
        <library>foo</library>
      </libraries>
    </cmake-project>

List elements are omitted when their list is empty; readers treat a
missing element as "no items".
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .config_writer import write_text_artifact

ROOT_TAG = "cmake-project"
INDENT = "  "

# (attribute, list tag, item tag) of the list-valued fields, in document order
LIST_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("dependencies", "depends", "dependency"),
    ("include_directories", "include-directories", "directory"),
    ("libraries", "libraries", "library"),
    ("executables", "executables", "executable"),
)

# "&" must be replaced first, or the entities introduced below get escaped again.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_text(text: str) -> str:
    """Escape the five reserved markup characters."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


@dataclass(frozen=True)
class ManifestDocument:
    """Description of an exported package for external tooling.

    Attributes:
        name: Package name
        source_directory: Real path of the project source directory
        find_package_args: One argument list per find-package element
        dependencies: Dependency specifications of the export
        include_directories: Include directories as given in the request
        libraries: Library target names
        executables: Executable target names
    """

    name: str
    source_directory: str
    find_package_args: tuple[tuple[str, ...], ...] = ()
    dependencies: tuple[str, ...] = ()
    include_directories: tuple[str, ...] = ()
    libraries: tuple[str, ...] = ()
    executables: tuple[str, ...] = ()

    def render(self) -> str:
        lines = ["<?xml version='1.0' ?>", f"<{ROOT_TAG}>"]
        lines.append(_text_element(INDENT, "name", self.name))
        lines.append(_text_element(INDENT, "source-directory", self.source_directory))
        for args in self.find_package_args:
            lines.extend(_list_element(INDENT, "find-package", "arg", args))
        for attribute, list_tag, item_tag in LIST_FIELDS:
            lines.extend(_list_element(INDENT, list_tag, item_tag, getattr(self, attribute)))
        lines.append(f"</{ROOT_TAG}>")
        return "\n".join(lines) + "\n"

    def write(self, dump_directory: Path) -> Path:
        """Write ``<dump_directory>/<name>.xml``.

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        path = dump_directory / f"{self.name}.xml"
        write_text_artifact(path, self.render())
        return path


def _text_element(indent: str, tag: str, text: str) -> str:
    return f"{indent}<{tag}>{escape_text(text)}</{tag}>"


def _list_element(indent: str, list_tag: str, item_tag: str, items: Sequence[str]) -> list[str]:
    if not items:
        return []
    lines = [f"{indent}<{list_tag}>"]
    lines.extend(_text_element(indent + INDENT, item_tag, item) for item in items)
    lines.append(f"{indent}</{list_tag}>")
    return lines


class ManifestEmitter:
    """Builds the manifest of an export."""

    def emit(
        self,
        project_name: str,
        source_directory: Path,
        find_package_args: Iterable[Sequence[str]],
        dependencies: Iterable[str],
        include_directories: Iterable[str],
        libraries: Iterable[str],
        executables: Iterable[str],
    ) -> ManifestDocument:
        return ManifestDocument(
            name=project_name,
            source_directory=str(source_directory.resolve()),
            find_package_args=tuple(tuple(args) for args in find_package_args),
            dependencies=tuple(dependencies),
            include_directories=tuple(include_directories),
            libraries=tuple(libraries),
            executables=tuple(executables),
        )


def read_manifest(path: Path) -> ManifestDocument:
    """Parse a manifest written by ManifestDocument.write().

    Raises:
        ValueError: If the file is not a manifest
        OSError: If the file cannot be read
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ValueError(f"Invalid manifest {path}: {e}") from e
    if root.tag != ROOT_TAG:
        raise ValueError(f"Invalid manifest {path}: root element is <{root.tag}>, expected <{ROOT_TAG}>")

    def items(list_tag: str, item_tag: str) -> tuple[str, ...]:
        element = root.find(list_tag)
        if element is None:
            return ()
        return tuple(child.text or "" for child in element.findall(item_tag))

    lists = {attribute: items(list_tag, item_tag) for attribute, list_tag, item_tag in LIST_FIELDS}
    return ManifestDocument(
        name=root.findtext("name", default=""),
        source_directory=root.findtext("source-directory", default=""),
        find_package_args=tuple(
            tuple(arg.text or "" for arg in element.findall("arg")) for element in root.findall("find-package")
        ),
        **lists,
    )

