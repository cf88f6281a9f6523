"""Console progress and summary output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from monokit.execution import BatchResult, CommandReporter


def console_reporter(
    console: Console,
    error_console: Console,
    *,
    show_stdout: bool = False,
) -> CommandReporter:
    """Build a reporter that writes line-oriented progress to the consoles.

    Args:
        console: Console for progress lines.
        error_console: Console for stderr lines.
        show_stdout: Also echo each stdout line of the commands.

    Returns:
        Reporter wired to the consoles.
    """

    def on_start(name: str, command: str) -> None:
        console.print(f"[yellow]{escape(name)}[/yellow]: {escape(command)}")

    def on_output(name: str, line: str, is_stderr: bool) -> None:
        if is_stderr:
            if line.strip():
                error_console.print(f"[red]{escape(name)}[/red] :: {escape(line)}")
        elif show_stdout:
            console.print(f"[dim]{escape(name)} |[/dim] {escape(line)}")

    def on_exit(name: str, command: str, exit_code: int) -> None:
        style = "green" if exit_code == 0 else "red"
        console.print(
            f"[blue]{escape(name)}[/blue]: [bright_yellow]{escape(command)}[/bright_yellow] "
            f"finished with code [{style}]{exit_code}[/{style}]"
        )

    return CommandReporter(on_start=on_start, on_output=on_output, on_exit=on_exit)


def print_batch_summary(result: BatchResult, console: Console, error_console: Console) -> None:
    """Print the outcome of a bulk command."""
    if not result.results:
        console.print("[yellow]No projects matched[/yellow]")
        return

    for r in result.failures:
        error_console.print(
            f"[red]✗[/red] {escape(r.project_name)}: {escape(r.command)} (exit {r.exit_code})"
        )

    if result.all_success:
        console.print(f"\n[green]All {len(result)} commands succeeded[/green]")
    else:
        console.print(
            f"\n[red]{result.failure_count} failed, {result.success_count} passed"
            + (f", {result.cancelled_count} cancelled" if result.cancelled_count else "")
            + "[/red]"
        )
