"""Exception hierarchy for monokit."""

from __future__ import annotations

from pathlib import Path


class MonokitError(Exception):
    """Base class for all monokit errors.

    Attributes:
        message: Human readable description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(MonokitError):
    """Raised when monokit.yaml cannot be loaded or validated."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class DiscoveryError(MonokitError):
    """Raised when the workspace root cannot be scanned."""

    def __init__(self, message: str, root: Path | None = None) -> None:
        self.root = root
        super().__init__(message)


class ManifestError(MonokitError):
    """Raised when a manifest has no usable version field."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class ExecutionError(MonokitError):
    """Raised when a subprocess fails to spawn or exits non-zero.

    Attributes:
        command: The command line that failed.
        exit_code: Process exit code, -1 when it never started.
        stderr: Captured standard error.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        exit_code: int = -1,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        if command:
            message = f"{message} (command: {command})"
        super().__init__(message)


class GitError(ExecutionError):
    """Raised when a git command fails."""


class CheckpointError(MonokitError):
    """Raised when the checkpoint file cannot be read or written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
