"""Project model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Project:
    """A project directory discovered under the workspace root.

    Attributes:
        name: Directory basename.
        path: Absolute path to the project directory.
        manifest: File name of the manifest inside the directory.
        pip: Whether the project also carries a Pipfile.
    """

    name: str
    path: Path
    manifest: str = "package.json"
    pip: bool = False

    @property
    def manifest_path(self) -> Path:
        """Absolute path to the project's manifest file."""
        return self.path / self.manifest
