"""Execution result types."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class ExecutionStatus(Enum):
    """Outcome of running a command in one project."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"


@dataclass
class ExecutionResult:
    """Result of running a command in a single project.

    Attributes:
        project_name: Project the command ran in.
        status: Execution status.
        exit_code: Process exit code (-1 if it never ran or could not spawn).
        stdout: Captured standard output.
        stderr: Captured standard error.
        duration_ms: Wall time in milliseconds.
        command: The command line.
    """

    project_name: str
    status: ExecutionStatus
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = 0
    command: str = ""

    @property
    def success(self) -> bool:
        return self.status == ExecutionStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status == ExecutionStatus.FAILURE

    @classmethod
    def success_result(
        cls,
        project_name: str,
        *,
        stdout: str = "",
        stderr: str = "",
        duration_ms: int = 0,
        command: str = "",
    ) -> ExecutionResult:
        return cls(
            project_name=project_name,
            status=ExecutionStatus.SUCCESS,
            exit_code=0,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            command=command,
        )

    @classmethod
    def failure_result(
        cls,
        project_name: str,
        exit_code: int,
        *,
        stdout: str = "",
        stderr: str = "",
        duration_ms: int = 0,
        command: str = "",
    ) -> ExecutionResult:
        return cls(
            project_name=project_name,
            status=ExecutionStatus.FAILURE,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            command=command,
        )

    @classmethod
    def cancelled_result(cls, project_name: str, command: str = "") -> ExecutionResult:
        return cls(
            project_name=project_name,
            status=ExecutionStatus.CANCELLED,
            exit_code=-1,
            command=command,
        )


@dataclass
class BatchResult:
    """Results of running a command across several projects."""

    results: list[ExecutionResult] = field(default_factory=list)

    def __iter__(self) -> Iterator[ExecutionResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def all_success(self) -> bool:
        return all(r.success for r in self.results)

    @property
    def any_failure(self) -> bool:
        return any(r.failed for r in self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if r.failed)

    @property
    def cancelled_count(self) -> int:
        return sum(1 for r in self.results if r.status == ExecutionStatus.CANCELLED)

    @property
    def failures(self) -> list[ExecutionResult]:
        return [r for r in self.results if r.failed]
