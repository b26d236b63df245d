"""Two-stage attribute templates.

A usage-requirement list in the generated config file mixes literal entries
(own definitions, absolute include paths, shared library names) with
references to another package's variables that only get a value when the
config file is loaded, e.g. ``${Boost_INCLUDE_DIRS}``.

Deduplication therefore happens twice:
1. At export time, on the literal text of the entries (Template.entries)
2. At load time, on the fully resolved list (Template.render, and the
   ``list(REMOVE_DUPLICATES ...)`` emitted into the config file)
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence, TypeVar, Union

T = TypeVar("T")


def dedupe(items: Iterable[T]) -> list[T]:
    """Remove exact duplicates, keeping the first occurrence of each item."""
    seen: set[T] = set()
    result: list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


@dataclass(frozen=True)
class DeferredRef:
    """Reference to a variable of another package, e.g. ``Boost_LIBRARIES``."""

    variable: str

    def __str__(self) -> str:
        return "${" + self.variable + "}"


Entry = Union[str, DeferredRef]


@dataclass
class Template:
    """Ordered list of literal entries and deferred references."""

    items: list[Entry] = field(default_factory=list)

    def add_literal(self, value: str) -> None:
        self.items.append(value)

    def add_literals(self, values: Iterable[str]) -> None:
        self.items.extend(values)

    def add_deferred(self, variable: str) -> None:
        self.items.append(DeferredRef(variable))

    def entries(self) -> list[Entry]:
        """Export-time view: entries with exact duplicates removed."""
        return dedupe(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def render(self, resolved: Mapping[str, Sequence[str]]) -> list[str]:
        """Load-time view: substitute deferred references and deduplicate.

        A reference to a variable missing from ``resolved`` expands to
        nothing, as an unset variable does when the config file is loaded.
        """
        values: list[str] = []
        for entry in self.entries():
            if isinstance(entry, DeferredRef):
                values.extend(resolved.get(entry.variable, ()))
            else:
                values.append(entry)
        return dedupe(values)
