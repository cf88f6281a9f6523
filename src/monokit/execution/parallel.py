"""Parallel command execution with concurrency control."""

from __future__ import annotations

import asyncio

from monokit.execution.reporting import CommandReporter
from monokit.execution.results import BatchResult, ExecutionResult
from monokit.execution.runner import run_in_project
from monokit.workspace.project import Project


class ParallelExecutor:
    """Execute a command across projects with bounded parallelism.

    Projects share no state, so each one runs in its own subprocess. With
    ``fail_fast`` the projects that have not started yet when a failure is
    observed are reported as cancelled.

    Attributes:
        concurrency: Maximum number of concurrent executions.
        fail_fast: Stop on first failure.
    """

    def __init__(
        self,
        concurrency: int = 4,
        fail_fast: bool = False,
        reporter: CommandReporter | None = None,
    ) -> None:
        self.concurrency = max(1, concurrency)
        self.fail_fast = fail_fast
        self.reporter = reporter or CommandReporter()
        self._cancelled = False

    async def execute(
        self,
        projects: list[Project],
        command: str,
        *,
        env: dict[str, str] | None = None,
    ) -> BatchResult:
        """Execute command across projects.

        Args:
            projects: Projects to run the command in.
            command: Shell command to execute.
            env: Environment variables.

        Returns:
            Batch result, in the order of ``projects``.
        """
        self._cancelled = False
        semaphore = asyncio.Semaphore(self.concurrency)

        async def run_one(project: Project) -> ExecutionResult:
            async with semaphore:
                if self._cancelled:
                    return ExecutionResult.cancelled_result(project.name, command)

                result = await run_in_project(
                    project,
                    command,
                    env=env,
                    reporter=self.reporter,
                )

                if self.fail_fast and result.failed:
                    self._cancelled = True

                return result

        tasks = [asyncio.create_task(run_one(project)) for project in projects]
        results = await asyncio.gather(*tasks)

        return BatchResult(results=list(results))

    async def execute_sequential(
        self,
        projects: list[Project],
        command: str,
        *,
        env: dict[str, str] | None = None,
    ) -> BatchResult:
        """Execute command in one project at a time, in order.

        Args:
            projects: Projects to run the command in.
            command: Shell command to execute.
            env: Environment variables.

        Returns:
            Batch result.
        """
        results: list[ExecutionResult] = []
        self._cancelled = False

        for project in projects:
            if self._cancelled:
                results.append(ExecutionResult.cancelled_result(project.name, command))
                continue

            result = await run_in_project(project, command, env=env, reporter=self.reporter)
            results.append(result)

            if self.fail_fast and result.failed:
                self._cancelled = True

        return BatchResult(results=results)
