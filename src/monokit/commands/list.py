"""List command implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from monokit.commands.base import CommandContext, SyncCommand
from monokit.errors import ManifestError
from monokit.versioning import read_version

if TYPE_CHECKING:
    from monokit.workspace import Workspace


@dataclass
class ProjectInfo:
    """Information about a project for display."""

    name: str
    path: str
    version: str | None
    pip: bool


@dataclass
class ListResult:
    """Result of list command."""

    projects: list[ProjectInfo]


class ListCommand(SyncCommand[ListResult]):
    """List the projects of the workspace."""

    def execute(self) -> ListResult:
        infos: list[ProjectInfo] = []
        for project in self.workspace.projects.values():
            try:
                version: str | None = str(read_version(project.manifest_path))
            except ManifestError:
                version = None
            infos.append(
                ProjectInfo(
                    name=project.name,
                    path=str(project.path),
                    version=version,
                    pip=project.pip,
                )
            )
        return ListResult(projects=infos)


def list_projects(workspace: Workspace) -> ListResult:
    """Convenience function to list projects."""
    return ListCommand(CommandContext(workspace=workspace)).execute()
