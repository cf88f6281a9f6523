"""Workspace: a root directory and the projects beneath it."""

from __future__ import annotations

from pathlib import Path

from monokit.config import MonokitConfig, load_config
from monokit.errors import DiscoveryError
from monokit.workspace.discovery import discover_projects
from monokit.workspace.project import Project


class Workspace:
    """A monorepo root with its configuration and discovered projects.

    Attributes:
        root: Absolute workspace root.
        config: Loaded configuration.
        projects: Projects keyed by name, in discovery order.
    """

    def __init__(self, root: Path, config: MonokitConfig, projects: list[Project]) -> None:
        self.root = root
        self.config = config
        self.projects: dict[str, Project] = {p.name: p for p in projects}

    @classmethod
    def discover(cls, path: Path | None = None) -> Workspace:
        """Load the workspace rooted at path (default: current directory).

        Args:
            path: Workspace root.

        Returns:
            Workspace instance.

        Raises:
            DiscoveryError: If the root is not a readable directory.
            ConfigurationError: If monokit.yaml is invalid.
        """
        root = (path or Path.cwd()).resolve()
        if not root.is_dir():
            raise DiscoveryError(f"Workspace root is not a directory: {root}", root=root)

        config = load_config(root)
        projects = discover_projects(root, config.manifest, ignore=config.ignore)
        return cls(root, config, projects)

    @property
    def checkpoint_path(self) -> Path:
        """Absolute path to the checkpoint file."""
        return self.root / self.config.checkpoint

    def __len__(self) -> int:
        return len(self.projects)

    def __repr__(self) -> str:
        return f"Workspace(root={self.root!s}, projects={list(self.projects)})"
