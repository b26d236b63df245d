"""Generation of ``<Project>Config.cmake``.

The generated file is loaded by find_package() in consuming projects. It:
- Returns early when it was already loaded (inclusion guard)
- Re-runs find_package() for every dependency
- Sets <Project>_DEFINITIONS, <Project>_INCLUDE_DIRS and <Project>_LIBRARIES,
  removing duplicates again once the dependency references are resolved
- Ends with the raw code fragments of the export, verbatim

Example output:
    # Generated by pkgexport

    if(__FooConfig_included)
     return()
    endif(__FooConfig_included)
    set(__FooConfig_included TRUE)

    find_package(Boost COMPONENTS filesystem)

    set(Foo_INCLUDE_DIRS
     "/src/foo/include/"
     ${Boost_INCLUDE_DIRS}
     )
    if(Foo_INCLUDE_DIRS)
     list(REMOVE_DUPLICATES Foo_INCLUDE_DIRS)
    endif()
"""

from pathlib import Path
from typing import Iterable

from .accumulator import DEFINITIONS_SUFFIX, INCLUDE_DIRS_SUFFIX, LIBRARIES_SUFFIX, AggregatedAttributes
from .models import ArtifactWriteError
from .template import DeferredRef, Entry, Template, dedupe

HEADER = "# Generated by pkgexport\n\n"


def include_guard_name(project_name: str) -> str:
    return f"__{project_name}Config_included"


def _format_entry(entry: Entry, quote: bool) -> str:
    if isinstance(entry, DeferredRef):
        return str(entry)
    if quote:
        escaped = entry.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
        return '"' + escaped + '"'
    return entry


def render_guard(project_name: str) -> str:
    guard = include_guard_name(project_name)
    return f"if({guard})\n return()\nendif({guard})\nset({guard} TRUE)\n\n"


def render_variable(variable: str, template: Template, quote: bool = False) -> str:
    """Render a set() block with its load-time deduplication.

    Returns an empty string for an empty template; no empty set() is emitted.
    """
    # A literal "${Dep_VAR}" and a deferred Dep_VAR reference serialize identically.
    entries = dedupe(_format_entry(entry, quote) for entry in template.entries())
    if not entries:
        return ""
    lines = [f"set({variable}"]
    lines.extend(" " + entry for entry in entries)
    lines.append(" )")
    lines.append(f"if({variable})")
    lines.append(f" list(REMOVE_DUPLICATES {variable})")
    lines.append("endif()")
    return "\n".join(lines) + "\n\n"


def render_config(aggregated: AggregatedAttributes, project_name: str, code_fragments: Iterable[str] = ()) -> str:
    """Render the full config file text, sections in fixed order."""
    parts = [HEADER, render_guard(project_name)]

    if aggregated.find_package_statements:
        parts.append("\n".join(aggregated.find_package_statements) + "\n\n")

    parts.append(render_variable(project_name + DEFINITIONS_SUFFIX, aggregated.definitions))
    parts.append(render_variable(project_name + INCLUDE_DIRS_SUFFIX, aggregated.include_dirs, quote=True))
    parts.append(render_variable(project_name + LIBRARIES_SUFFIX, aggregated.libraries))

    for fragment in code_fragments:
        parts.append(fragment if fragment.endswith("\n") else fragment + "\n")

    return "".join(parts)


def write_text_artifact(path: Path, content: str) -> None:
    """Write a generated file, creating parent directories.

    Raises:
        ArtifactWriteError: If the file or its directory cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise ArtifactWriteError(f"Failed to write {path}: {e}") from e


class ConfigArtifactWriter:
    """Writes ``<Project>Config.cmake`` from aggregated usage requirements."""

    def render(self, aggregated: AggregatedAttributes, project_name: str, code_fragments: Iterable[str] = ()) -> str:
        return render_config(aggregated, project_name, code_fragments)

    def write(
        self,
        aggregated: AggregatedAttributes,
        project_name: str,
        code_fragments: Iterable[str],
        output_path: Path,
    ) -> None:
        """Render and write the config file.

        Args:
            aggregated: Accumulated usage requirements
            project_name: Package name (guard and variable prefix)
            code_fragments: Raw code appended verbatim, in order
            output_path: Destination file

        Raises:
            ArtifactWriteError: If the destination cannot be created or written
        """
        write_text_artifact(output_path, self.render(aggregated, project_name, code_fragments))
