"""Project discovery."""

from __future__ import annotations

import fnmatch
from pathlib import Path

from monokit.errors import DiscoveryError
from monokit.workspace.project import Project

PIPFILE = "Pipfile"


def discover_projects(
    root: Path,
    manifest: str = "package.json",
    *,
    ignore: list[str] | None = None,
) -> list[Project]:
    """Find the projects among the immediate children of root.

    A child directory is a project when it contains the manifest file.
    Subdirectories are not searched. Hidden directories and names matching
    an ignore pattern are skipped.

    Args:
        root: Directory to scan.
        manifest: Manifest file name identifying a project.
        ignore: Glob patterns of directory names to skip.

    Returns:
        Projects sorted by directory name.

    Raises:
        DiscoveryError: If root cannot be listed.
    """
    root = root.resolve()
    try:
        children = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(f"Cannot read workspace root {root}: {e}", root=root) from e

    projects: list[Project] = []
    for child in children:
        if child.name.startswith("."):
            continue
        if ignore and any(fnmatch.fnmatch(child.name, pattern) for pattern in ignore):
            continue
        if not child.is_dir() or not (child / manifest).is_file():
            continue
        projects.append(
            Project(
                name=child.name,
                path=child,
                manifest=manifest,
                pip=(child / PIPFILE).is_file(),
            )
        )

    return projects
