"""Selecting projects with ``--scope``."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase

from monokit.workspace.project import Project


@dataclass(frozen=True)
class Scope:
    """A parsed ``--scope`` value.

    The value is a comma-separated list of globs matched against project
    directory names, case-sensitively. Entries starting with ``!`` exclude
    projects. With exclusions only, every other project is selected.
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str | None) -> Scope:
        include: list[str] = []
        exclude: list[str] = []
        for entry in (value or "").split(","):
            entry = entry.strip()
            if entry.startswith("!"):
                entry = entry[1:].strip()
                if entry:
                    exclude.append(entry)
            elif entry:
                include.append(entry)
        return cls(tuple(include), tuple(exclude))

    def __bool__(self) -> bool:
        return bool(self.include or self.exclude)

    def matches(self, name: str) -> bool:
        if any(fnmatchcase(name, pattern) for pattern in self.exclude):
            return False
        return not self.include or any(fnmatchcase(name, pattern) for pattern in self.include)


def filter_by_scope(projects: list[Project], scope: str | None) -> list[Project]:
    """Keep the projects selected by ``scope``, in their original order."""
    selected = Scope.parse(scope)
    if not selected:
        return projects
    return [p for p in projects if selected.matches(p.name)]
