"""Publish command."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from monokit.commands.base import Command, CommandContext
from monokit.execution import BatchResult, CommandReporter, ParallelExecutor
from monokit.filters import filter_by_scope
from monokit.versioning import read_manifest

if TYPE_CHECKING:
    from monokit.workspace import Project, Workspace

PRIVATE_PATTERN = re.compile(r'"private"\s*:\s*true\b')


@dataclass
class PublishResult:
    """Result of publish command.

    Attributes:
        batch: Results of the publish command per published project.
        skipped: Names of private projects that were not published.
        planned: Names of the projects selected for publishing.
    """

    batch: BatchResult
    skipped: list[str] = field(default_factory=list)
    planned: list[str] = field(default_factory=list)


@dataclass
class PublishOptions:
    """Options for publish command."""

    scope: str | None = None
    fail_fast: bool = False


def is_private(project: Project) -> bool:
    """Check whether a project's manifest marks it as private."""
    return PRIVATE_PATTERN.search(read_manifest(project.manifest_path)) is not None


class PublishCommand(Command[PublishResult]):
    """Publish every non-private project, one at a time."""

    def __init__(self, context: CommandContext, options: PublishOptions | None = None) -> None:
        super().__init__(context)
        self.options = options or PublishOptions()

    async def execute(self) -> PublishResult:
        projects = filter_by_scope(list(self.workspace.projects.values()), self.options.scope)

        public: list[Project] = []
        skipped: list[str] = []
        for project in projects:
            if is_private(project):
                skipped.append(project.name)
            else:
                public.append(project)

        if self.context.dry_run or not public:
            return PublishResult(
                batch=BatchResult(results=[]),
                skipped=skipped,
                planned=[p.name for p in public],
            )

        executor = ParallelExecutor(
            concurrency=1,
            fail_fast=self.options.fail_fast,
            reporter=self.context.reporter,
        )
        batch = await executor.execute_sequential(
            public,
            self.workspace.config.commands.publish,
            env=self.context.command_env(),
        )
        return PublishResult(batch=batch, skipped=skipped, planned=[p.name for p in public])


async def publish(
    workspace: Workspace,
    *,
    scope: str | None = None,
    fail_fast: bool | None = None,
    dry_run: bool = False,
    reporter: CommandReporter | None = None,
) -> PublishResult:
    """Convenience function to publish projects."""
    context = CommandContext(
        workspace=workspace,
        dry_run=dry_run,
        reporter=reporter or CommandReporter(),
    )
    options = PublishOptions(
        scope=scope,
        fail_fast=workspace.config.fail_fast if fail_fast is None else fail_fast,
    )
    return await PublishCommand(context, options).execute()
