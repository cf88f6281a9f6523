"""Git command execution."""

from __future__ import annotations

import subprocess
from pathlib import Path

from monokit.errors import GitError


def run_git_command(
    args: list[str],
    cwd: Path | None = None,
    *,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a git command synchronously.

    Args:
        args: Git command arguments (without 'git').
        cwd: Working directory.
        check: Raise on non-zero exit code.

    Returns:
        Completed process result.

    Raises:
        GitError: If git or the working directory is missing, or the command
            fails and check is True.
    """
    cmd = ["git"] + args

    if cwd is not None and not cwd.is_dir():
        raise GitError(f"Working directory does not exist: {cwd}", command=" ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("Git is not installed", command=" ".join(cmd)) from e

    if check and result.returncode != 0:
        raise GitError(
            result.stderr.strip() or f"Command failed with exit code {result.returncode}",
            command=" ".join(cmd),
            exit_code=result.returncode,
            stderr=result.stderr,
        )
    return result
