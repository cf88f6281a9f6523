"""Workspace discovery."""

from monokit.workspace.discovery import discover_projects
from monokit.workspace.project import Project
from monokit.workspace.workspace import Workspace

__all__ = ["Project", "Workspace", "discover_projects"]
