"""Exec command: run one shell command in every project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from monokit.commands.base import Command, CommandContext
from monokit.execution import BatchResult, CommandReporter, ParallelExecutor
from monokit.filters import filter_by_scope

if TYPE_CHECKING:
    from monokit.workspace import Project, Workspace


@dataclass
class ExecOptions:
    """Options for exec command."""

    command: str
    scope: str | None = None
    concurrency: int = 4
    fail_fast: bool = False
    sequential: bool = False


class ExecCommand(Command[BatchResult]):
    """Execute a command string across projects.

    Projects share no state, so the command runs concurrently unless
    ``sequential`` is set.
    """

    def __init__(self, context: CommandContext, options: ExecOptions) -> None:
        super().__init__(context)
        self.options = options

    def get_projects(self) -> list[Project]:
        """Get projects to execute the command in."""
        return filter_by_scope(list(self.workspace.projects.values()), self.options.scope)

    async def execute(self) -> BatchResult:
        projects = self.get_projects()
        if not projects:
            return BatchResult(results=[])

        executor = ParallelExecutor(
            concurrency=self.options.concurrency,
            fail_fast=self.options.fail_fast,
            reporter=self.context.reporter,
        )
        env = self.context.command_env()

        if self.options.sequential:
            return await executor.execute_sequential(projects, self.options.command, env=env)
        return await executor.execute(projects, self.options.command, env=env)


async def exec_command(
    workspace: Workspace,
    command: str,
    *,
    scope: str | None = None,
    concurrency: int | None = None,
    fail_fast: bool | None = None,
    sequential: bool = False,
    reporter: CommandReporter | None = None,
) -> BatchResult:
    """Convenience function to execute a command.

    Args:
        workspace: Workspace to run in.
        command: Command to execute.
        scope: Project scope filter.
        concurrency: Parallel jobs (default from config).
        fail_fast: Stop on first failure (default from config).
        sequential: Run one project at a time.
        reporter: Progress callbacks.

    Returns:
        Batch result.
    """
    context = CommandContext(workspace=workspace, reporter=reporter or CommandReporter())
    options = ExecOptions(
        command=command,
        scope=scope,
        concurrency=workspace.config.concurrency if concurrency is None else concurrency,
        fail_fast=workspace.config.fail_fast if fail_fast is None else fail_fast,
        sequential=sequential,
    )
    return await ExecCommand(context, options).execute()
