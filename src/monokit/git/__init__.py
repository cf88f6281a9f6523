"""Git operations."""

from monokit.git.commits import commit, get_commit_subjects, log_args, stage_all
from monokit.git.repo import run_git_command

__all__ = [
    "commit",
    "get_commit_subjects",
    "log_args",
    "run_git_command",
    "stage_all",
]
