"""Progress reporting hooks for command execution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

StartHandler = Callable[[str, str], None]
OutputHandler = Callable[[str, str, bool], None]
ExitHandler = Callable[[str, str, int], None]


@dataclass
class CommandReporter:
    """Callbacks fired around every command monokit runs.

    Attributes:
        on_start: Called with (project_name, command) before spawning.
        on_output: Called with (project_name, line, is_stderr) per output line.
        on_exit: Called with (project_name, command, exit_code) after exit.
    """

    on_start: StartHandler | None = None
    on_output: OutputHandler | None = None
    on_exit: ExitHandler | None = None

    def started(self, project_name: str, command: str) -> None:
        if self.on_start:
            self.on_start(project_name, command)

    def output(self, project_name: str, line: str, is_stderr: bool) -> None:
        if self.on_output:
            self.on_output(project_name, line, is_stderr)

    def finished(self, project_name: str, command: str, exit_code: int) -> None:
        if self.on_exit:
            self.on_exit(project_name, command, exit_code)
