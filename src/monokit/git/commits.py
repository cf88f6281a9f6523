"""Commit log reading and committing."""

from __future__ import annotations

from pathlib import Path

from monokit.git.repo import run_git_command


def log_args(since: str | None = None) -> list[str]:
    """Build the git log arguments listing commit subjects for a directory."""
    args = ["log", "--pretty=format:%s"]
    if since:
        args.append(f"--since={since}")
    args.extend(["--", "."])
    return args


def get_commit_subjects(cwd: Path, since: str | None = None) -> list[str]:
    """Get the subject line of every commit touching cwd since a timestamp.

    Args:
        cwd: Project directory; the log is limited to paths beneath it.
        since: Timestamp understood by ``git log --since``. None means the
            whole history.

    Returns:
        Raw subject lines, newest first.

    Raises:
        GitError: If git log fails.
    """
    result = run_git_command(log_args(since), cwd=cwd)
    return result.stdout.splitlines()


def stage_all(cwd: Path) -> None:
    """Stage every change beneath cwd."""
    run_git_command(["add", "--all", "--", "."], cwd=cwd)


def commit(cwd: Path, message: str) -> str:
    """Commit the changes beneath cwd.

    Only paths under cwd are committed, even if other paths are staged.

    Args:
        cwd: Directory whose changes are committed.
        message: Commit message.

    Returns:
        SHA of the new commit.

    Raises:
        GitError: If the commit fails.
    """
    run_git_command(["commit", "-m", message, "--", "."], cwd=cwd)
    return run_git_command(["rev-parse", "HEAD"], cwd=cwd).stdout.strip()
