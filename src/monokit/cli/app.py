"""monokit CLI application."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from monokit.cli.output import console_reporter, print_batch_summary
from monokit.errors import MonokitError
from monokit.execution import BatchResult
from monokit.workspace import Workspace


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from monokit import __version__

        print(f"monokit {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="monokit",
    help="Maintenance toolkit for a directory of sibling projects",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def _app_callback(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", help="Show version and exit", callback=version_callback),
    ] = False,
) -> None:
    """Maintenance toolkit for a directory of sibling projects."""
    pass


console = Console()
error_console = Console(stderr=True)

RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Workspace root (default: current directory)"),
]
ScopeOption = Annotated[
    str | None,
    typer.Option("--scope", "-s", help="Comma-separated directory globs; prefix with ! to exclude"),
]
ConcurrencyOption = Annotated[
    int | None,
    typer.Option("--concurrency", "-c", help="Parallel jobs"),
]
FailFastOption = Annotated[
    bool,
    typer.Option("--fail-fast", help="Stop on first failure (default from monokit.yaml)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Echo command output"),
]


def get_workspace(path: Path | None = None) -> Workspace:
    """Load workspace from current directory or specified path."""
    try:
        return Workspace.discover(path)
    except MonokitError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e


def finish_batch(result: BatchResult) -> None:
    """Print a bulk command summary and exit non-zero on failure."""
    print_batch_summary(result, console, error_console)
    if not result.all_success:
        raise typer.Exit(1)


def run_configured(
    kind: str,
    root: Path | None,
    scope: str | None,
    concurrency: int | None,
    fail_fast: bool,
    verbose: bool,
) -> None:
    """Run one of the configured package-manager commands across projects."""
    from monokit.commands import exec_command

    workspace = get_workspace(root)
    command = getattr(workspace.config.commands, kind)
    reporter = console_reporter(console, error_console, show_stdout=verbose)

    result = asyncio.run(
        exec_command(
            workspace,
            command,
            scope=scope,
            concurrency=concurrency,
            fail_fast=fail_fast or None,
            reporter=reporter,
        )
    )
    finish_batch(result)


@app.command("list")
def list_cmd(
    root: RootOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """List discovered projects."""
    from monokit.commands import list_projects

    workspace = get_workspace(root)
    result = list_projects(workspace)

    if json_output:
        data = [
            {"name": p.name, "version": p.version, "path": p.path, "pip": p.pip}
            for p in result.projects
        ]
        print(json.dumps(data, indent=2))
        return

    table = Table(title="Projects")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Path")
    table.add_column("Pipenv")

    for p in result.projects:
        table.add_row(p.name, p.version or "[red]?[/red]", p.path, "yes" if p.pip else "-")

    console.print(table)


@app.command()
def install(
    root: RootOption = None,
    scope: ScopeOption = None,
    concurrency: ConcurrencyOption = None,
    fail_fast: FailFastOption = False,
    skip_pip: Annotated[
        bool,
        typer.Option("--skip-pip", help="Do not sync pipenv environments"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Install dependencies in every project."""
    from monokit.commands import install as do_install

    workspace = get_workspace(root)
    reporter = console_reporter(console, error_console, show_stdout=verbose)

    result = asyncio.run(
        do_install(
            workspace,
            scope=scope,
            concurrency=concurrency,
            fail_fast=fail_fast or None,
            skip_pip=skip_pip,
            reporter=reporter,
        )
    )
    finish_batch(result)


@app.command()
def build(
    root: RootOption = None,
    scope: ScopeOption = None,
    concurrency: ConcurrencyOption = None,
    fail_fast: FailFastOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Build every project."""
    run_configured("build", root, scope, concurrency, fail_fast, verbose)


@app.command()
def update(
    root: RootOption = None,
    scope: ScopeOption = None,
    concurrency: ConcurrencyOption = None,
    fail_fast: FailFastOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Update dependencies in every project."""
    run_configured("update", root, scope, concurrency, fail_fast, verbose)


@app.command("exec")
def exec_cmd(
    command: Annotated[str, typer.Argument(help="Command to execute")],
    root: RootOption = None,
    scope: ScopeOption = None,
    concurrency: ConcurrencyOption = None,
    fail_fast: FailFastOption = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose/--quiet", help="Echo command output"),
    ] = True,
) -> None:
    """Execute an arbitrary command in every project."""
    from monokit.commands import exec_command

    workspace = get_workspace(root)
    reporter = console_reporter(console, error_console, show_stdout=verbose)

    result = asyncio.run(
        exec_command(
            workspace,
            command,
            scope=scope,
            concurrency=concurrency,
            fail_fast=fail_fast or None,
            reporter=reporter,
        )
    )
    finish_batch(result)


@app.command()
def publish(
    root: RootOption = None,
    scope: ScopeOption = None,
    fail_fast: FailFastOption = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be published"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Publish every non-private project, one at a time."""
    from monokit.commands import publish as do_publish

    workspace = get_workspace(root)
    reporter = console_reporter(console, error_console, show_stdout=verbose)

    try:
        result = asyncio.run(
            do_publish(
                workspace,
                scope=scope,
                fail_fast=fail_fast or None,
                dry_run=dry_run,
                reporter=reporter,
            )
        )
    except MonokitError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    for name in result.skipped:
        console.print(f"[dim]{escape(name)}: private, skipped[/dim]")

    if dry_run:
        console.print("[yellow]Dry run - nothing published[/yellow]")
        for name in result.planned:
            console.print(f"  - {escape(name)}")
        return

    finish_batch(result.batch)


@app.command()
def upgrade(
    root: RootOption = None,
    since: Annotated[
        str | None,
        typer.Option("--since", help="Read commits since this timestamp instead of the checkpoint"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show the version bumps without applying them"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Also show the git log command of every project"),
    ] = False,
) -> None:
    """Bump project versions from conventional commits since the last run."""
    from monokit.commands import ProjectUpgrade
    from monokit.commands import upgrade as do_upgrade

    workspace = get_workspace(root)
    reporter = console_reporter(console, error_console)

    def on_upgrade(item: ProjectUpgrade) -> None:
        console.print(f"[blue]{escape(item.name)}[/blue]: [red]{item.new_version}[/red]")

    try:
        result = asyncio.run(
            do_upgrade(
                workspace,
                since=since,
                dry_run=dry_run,
                verbose=verbose,
                reporter=reporter,
                on_upgrade=on_upgrade,
            )
        )
    except MonokitError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    if result.upgrades:
        table = Table(title="Dry run - pending upgrades" if dry_run else "Upgrades")
        table.add_column("Project", style="cyan")
        table.add_column("Current", style="dim")
        table.add_column("Next", style="green")
        table.add_column("Bump", style="magenta")
        table.add_column("feat/fix")

        for u in result.upgrades:
            table.add_row(
                u.name,
                u.old_version,
                u.new_version,
                u.bump_type.name.lower(),
                f"{u.counts.feature_count}/{u.counts.fix_count}",
            )
        console.print(table)
    else:
        console.print("[yellow]No projects require a version bump[/yellow]")

    for failure in result.failures:
        error_console.print(f"[red]✗[/red] {escape(failure.name)}: {escape(failure.error)}")

    if result.failures:
        error_console.print(
            f"\n[red]{len(result.failures)} project(s) failed; checkpoint not advanced[/red]"
        )
        raise typer.Exit(1)

    if result.checkpoint_written:
        console.print(f"Checkpoint: [blue]{result.checkpoint}[/blue]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
