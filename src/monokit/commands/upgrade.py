"""Upgrade command: bump project versions from their commit history."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from monokit.checkpoint import CheckpointStore, now_timestamp
from monokit.commands.base import Command, CommandContext
from monokit.errors import ExecutionError, GitError, MonokitError
from monokit.execution import CommandReporter
from monokit.git import commit, get_commit_subjects, log_args, stage_all
from monokit.versioning import (
    BumpType,
    ClassificationCount,
    classify_commits,
    determine_bump,
    find_version,
    next_version,
    read_manifest,
    replace_version,
    write_manifest,
)

if TYPE_CHECKING:
    from pathlib import Path

    from monokit.workspace import Project, Workspace

COMMIT_MESSAGE = "chore: upgrade package version"

T = TypeVar("T")


@dataclass
class ProjectUpgrade:
    """A version bump planned or applied for one project."""

    name: str
    old_version: str
    new_version: str
    bump_type: BumpType
    counts: ClassificationCount
    commit_sha: str | None = None


@dataclass
class ProjectFailure:
    """A project whose upgrade was aborted.

    Attributes:
        name: Project name.
        error: Error message.
        command: Failing command, when a subprocess failed.
    """

    name: str
    error: str
    command: str | None = None


@dataclass
class UpgradeResult:
    """Result of an upgrade run.

    Attributes:
        upgrades: Projects whose version was bumped (or would be, on dry run).
        failures: Projects whose processing was aborted.
        since: Start of the commit window that was read.
        checkpoint: Timestamp marking the end of this run.
        checkpoint_written: Whether the checkpoint file was advanced.
    """

    upgrades: list[ProjectUpgrade] = field(default_factory=list)
    failures: list[ProjectFailure] = field(default_factory=list)
    since: str | None = None
    checkpoint: str | None = None
    checkpoint_written: bool = False

    @property
    def success(self) -> bool:
        return not self.failures


@dataclass
class UpgradeOptions:
    """Options for upgrade command."""

    since: str | None = None
    dry_run: bool = False
    verbose: bool = False


class UpgradeCommand(Command[UpgradeResult]):
    """Bump each project's version from the commits since a checkpoint.

    Projects are processed one after another. Each project is read,
    rewritten and committed on its own; a failure aborts that project only.
    The command does not persist anything outside the projects: it returns
    the timestamp the caller should store as the next checkpoint.
    """

    def __init__(
        self,
        context: CommandContext,
        options: UpgradeOptions | None = None,
        *,
        on_upgrade: Callable[[ProjectUpgrade], None] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(context)
        self.options = options or UpgradeOptions()
        self.on_upgrade = on_upgrade
        self.clock = clock

    @property
    def is_dry_run(self) -> bool:
        return self.options.dry_run or self.context.dry_run

    @property
    def reporter(self) -> CommandReporter:
        return self.context.reporter

    def _run_git(self, project: Project, label: str, func: Callable[..., T], *args: object) -> T:
        """Run a git helper in the project directory, reporting it like any command."""
        self.reporter.started(project.name, label)
        try:
            value = func(project.path, *args)
        except GitError as e:
            self.reporter.output(project.name, e.stderr.strip() or e.message, True)
            self.reporter.finished(project.name, label, e.exit_code)
            raise
        self.reporter.finished(project.name, label, 0)
        return value

    def classify(self, project: Project) -> ClassificationCount:
        """Count the feature and fix commits of a project since the checkpoint.

        The log command goes to the reporter only when verbose.
        """
        if not self.options.verbose:
            return classify_commits(get_commit_subjects(project.path, self.options.since))
        label = "git " + " ".join(log_args(self.options.since))
        subjects = self._run_git(project, label, get_commit_subjects, self.options.since)
        return classify_commits(subjects)

    def upgrade_project(self, project: Project) -> ProjectUpgrade | None:
        """Bump, write and commit one project.

        Returns:
            The applied upgrade, or None when no commit called for a bump.

        Raises:
            ManifestError: If the manifest has no usable version field.
            GitError: If a git command fails.
        """
        counts = self.classify(project)

        manifest_path: Path = project.manifest_path
        text = read_manifest(manifest_path)
        current = find_version(text, manifest_path).version

        bump = determine_bump(counts)
        if bump is BumpType.NONE:
            return None

        new = next_version(current, counts)
        upgrade = ProjectUpgrade(
            name=project.name,
            old_version=str(current),
            new_version=str(new),
            bump_type=bump,
            counts=counts,
        )
        if self.is_dry_run:
            return upgrade

        write_manifest(manifest_path, replace_version(text, new, manifest_path))
        self._run_git(project, "git add --all -- .", stage_all)
        upgrade.commit_sha = self._run_git(
            project, f'git commit -m "{COMMIT_MESSAGE}" -- .', commit, COMMIT_MESSAGE
        )

        if self.on_upgrade:
            self.on_upgrade(upgrade)
        return upgrade

    async def execute(self) -> UpgradeResult:
        result = UpgradeResult(since=self.options.since)

        for project in self.workspace.projects.values():
            try:
                upgrade = self.upgrade_project(project)
            except MonokitError as e:
                command = e.command if isinstance(e, ExecutionError) else None
                result.failures.append(ProjectFailure(project.name, e.message, command))
                continue
            if upgrade is not None:
                result.upgrades.append(upgrade)

        result.checkpoint = now_timestamp(self.clock() if self.clock else None)
        return result


async def upgrade(
    workspace: Workspace,
    *,
    since: str | None = None,
    dry_run: bool = False,
    verbose: bool = False,
    reporter: CommandReporter | None = None,
    on_upgrade: Callable[[ProjectUpgrade], None] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> UpgradeResult:
    """Run the upgrade workflow against the workspace checkpoint.

    The checkpoint is read before any project is processed. It is advanced
    only when every project succeeded, so a failed run is retried over the
    same commit window. A dry run never writes it.

    Args:
        workspace: Workspace to upgrade.
        since: Override of the stored checkpoint.
        dry_run: Compute the plan without touching files or git.
        verbose: Also report the git log command of every project.
        reporter: Progress callbacks for git commands.
        on_upgrade: Called after each project is bumped and committed.
        clock: Source of the current time.

    Returns:
        Upgrade result.

    Raises:
        CheckpointError: If the checkpoint file cannot be read or written.
    """
    store = CheckpointStore(workspace.checkpoint_path)
    window_start = since if since is not None else store.read()

    context = CommandContext(
        workspace=workspace,
        dry_run=dry_run,
        reporter=reporter or CommandReporter(),
    )
    options = UpgradeOptions(since=window_start, dry_run=dry_run, verbose=verbose)
    result = await UpgradeCommand(context, options, on_upgrade=on_upgrade, clock=clock).execute()

    if not dry_run and result.success and result.checkpoint is not None:
        store.write(result.checkpoint)
        result.checkpoint_written = True

    return result
