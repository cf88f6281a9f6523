"""Shared test fixtures for monokit tests."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root (doesn't override existing env vars)
load_dotenv(Path(__file__).parent.parent / ".env")


def manifest_text(name: str, version: str, *, private: bool = False) -> str:
    """package.json content for a test project."""
    private_line = '  "private": true,\n' if private else ""
    return (
        "{\n"
        f'  "name": "{name}",\n'
        f'  "version": "{version}",\n'
        f"{private_line}"
        '  "scripts": {\n'
        '    "build": "tsc"\n'
        "  }\n"
        "}\n"
    )


def run_git(args: list[str], cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def workspace_dir(temp_dir: Path) -> Path:
    """Create a workspace with three projects and some non-project entries.

    Layout:
        api/      package.json 1.2.3 + Pipfile
        web/      package.json 2.0.0
        tools/    package.json 0.1.0, private
        docs/     no manifest
        .cache/   hidden, has a manifest
        notes.txt plain file
    """
    projects = {
        "api": ("1.2.3", False),
        "web": ("2.0.0", False),
        "tools": ("0.1.0", True),
    }
    for name, (version, private) in projects.items():
        project = temp_dir / name
        project.mkdir()
        (project / "package.json").write_text(
            manifest_text(name, version, private=private), encoding="utf-8"
        )
        (project / "index.js").write_text(f"// {name}\n", encoding="utf-8")

    (temp_dir / "api" / "Pipfile").write_text("[packages]\n", encoding="utf-8")

    (temp_dir / "docs").mkdir()
    (temp_dir / "docs" / "README.md").write_text("# docs\n", encoding="utf-8")

    (temp_dir / ".cache").mkdir()
    (temp_dir / ".cache" / "package.json").write_text(
        manifest_text("cache", "9.9.9"), encoding="utf-8"
    )

    (temp_dir / "notes.txt").write_text("not a project\n", encoding="utf-8")
    return temp_dir


@pytest.fixture
def git_workspace(workspace_dir: Path) -> Path:
    """The sample workspace as a single git repository with one initial commit."""
    if not shutil.which("git"):
        pytest.skip("git not found")

    run_git(["init", "-q"], workspace_dir)
    run_git(["config", "user.email", "test@example.com"], workspace_dir)
    run_git(["config", "user.name", "Test User"], workspace_dir)
    run_git(["config", "commit.gpgsign", "false"], workspace_dir)
    run_git(["add", "-A"], workspace_dir)
    run_git(["commit", "-q", "-m", "chore: initial commit"], workspace_dir)
    return workspace_dir
