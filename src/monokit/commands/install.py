"""Install command: pipenv sync where needed, then the package-manager install."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from monokit.commands.base import Command, CommandContext
from monokit.execution import BatchResult, CommandReporter, ParallelExecutor
from monokit.filters import filter_by_scope

if TYPE_CHECKING:
    from monokit.workspace import Workspace


@dataclass
class InstallOptions:
    """Options for install command."""

    scope: str | None = None
    concurrency: int = 4
    fail_fast: bool = False
    skip_pip: bool = False


class InstallCommand(Command[BatchResult]):
    """Install dependencies in every project.

    Projects carrying a Pipfile get their pipenv environment synced first.
    """

    def __init__(self, context: CommandContext, options: InstallOptions | None = None) -> None:
        super().__init__(context)
        self.options = options or InstallOptions()

    async def execute(self) -> BatchResult:
        projects = filter_by_scope(list(self.workspace.projects.values()), self.options.scope)
        if not projects:
            return BatchResult(results=[])

        commands = self.workspace.config.commands
        env = self.context.command_env()
        executor = ParallelExecutor(
            concurrency=self.options.concurrency,
            fail_fast=self.options.fail_fast,
            reporter=self.context.reporter,
        )

        results = []
        pip_projects = [p for p in projects if p.pip]
        if pip_projects and not self.options.skip_pip:
            pip_batch = await executor.execute(pip_projects, commands.pip_sync, env=env)
            results.extend(pip_batch.results)
            if self.options.fail_fast and pip_batch.any_failure:
                return BatchResult(results=results)

        install_batch = await executor.execute(projects, commands.install, env=env)
        results.extend(install_batch.results)
        return BatchResult(results=results)


async def install(
    workspace: Workspace,
    *,
    scope: str | None = None,
    concurrency: int | None = None,
    fail_fast: bool | None = None,
    skip_pip: bool = False,
    reporter: CommandReporter | None = None,
) -> BatchResult:
    """Convenience function to install dependencies across projects."""
    context = CommandContext(workspace=workspace, reporter=reporter or CommandReporter())
    options = InstallOptions(
        scope=scope,
        concurrency=workspace.config.concurrency if concurrency is None else concurrency,
        fail_fast=workspace.config.fail_fast if fail_fast is None else fail_fast,
        skip_pip=skip_pip,
    )
    return await InstallCommand(context, options).execute()
