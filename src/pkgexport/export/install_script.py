"""Install plan rendering.

InstallScript is an Installer that collects the install entries of an export
and renders them as CMake install() commands, one command per entry:

    install(DIRECTORY "include/"
      DESTINATION "include"
      COMPONENT "dev"
      CONFIGURATIONS "Release"
      REGEX "[.]in$" EXCLUDE
      )
    install(TARGETS foo
      ARCHIVE DESTINATION "lib"
      COMPONENT "dev"
      CONFIGURATIONS "Release"
      )
"""

from pathlib import Path

from .config_writer import write_text_artifact
from .models import Configuration, InstallEntry, InstallKind


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_install_command(entry: InstallEntry) -> str:
    """Render one install entry as an install() command."""
    if entry.kind is InstallKind.TARGET:
        lines = [f"install(TARGETS {entry.artifact}"]
        slot = f"{entry.slot.value} " if entry.slot is not None else ""
        lines.append(f"  {slot}DESTINATION {_quote(entry.destination)}")
    else:
        lines = [f"install({entry.kind.value} {_quote(entry.artifact)}"]
        lines.append(f"  DESTINATION {_quote(entry.destination)}")
    lines.append(f"  COMPONENT {_quote(entry.component.value)}")
    if entry.configuration is not Configuration.ANY:
        lines.append(f"  CONFIGURATIONS {_quote(entry.configuration.value)}")
    if entry.exclude_regex:
        lines.append(f"  REGEX {_quote(entry.exclude_regex)} EXCLUDE")
    lines.append("  )")
    return "\n".join(lines) + "\n"


class InstallScript:
    """Installer that renders the install plan as CMake code."""

    def __init__(self) -> None:
        self.entries: list[InstallEntry] = []

    def install(self, entry: InstallEntry) -> None:
        self.entries.append(entry)

    def render(self) -> str:
        return "# Generated by pkgexport\n\n" + "".join(render_install_command(e) for e in self.entries)

    def write(self, path: Path) -> None:
        """Write the rendered commands.

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        write_text_artifact(path, self.render())
