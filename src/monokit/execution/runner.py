"""Shell command execution with streamed, captured output."""

from __future__ import annotations

import asyncio
import contextlib
import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from monokit.execution.reporting import CommandReporter
from monokit.execution.results import ExecutionResult

if TYPE_CHECKING:
    from monokit.workspace.project import Project

# Longest output line read from a child process.
STREAM_LIMIT = 4 * 1024 * 1024


async def _read_stream(
    stream: asyncio.StreamReader,
    callback: Callable[[str], None] | None,
    buffer: list[str],
) -> None:
    """Read from stream line by line."""
    while True:
        line = await stream.readline()
        if not line:
            break
        decoded = line.decode("utf-8", errors="replace")
        buffer.append(decoded)
        if callback:
            callback(decoded.rstrip())


async def run_command(
    command: str,
    cwd: Path,
    *,
    env: dict[str, str] | None = None,
    on_stdout: Callable[[str], None] | None = None,
    on_stderr: Callable[[str], None] | None = None,
) -> tuple[int, str, str, int]:
    """Run a shell command asynchronously.

    A process that cannot be spawned is reported as exit code -1 with the
    error text on stderr. A process writing a line longer than
    STREAM_LIMIT is killed and reported the same way. This function does
    not raise for either case.

    Args:
        command: Shell command to execute.
        cwd: Working directory.
        env: Environment variables (merged with current env).
        on_stdout: Callback for stdout lines.
        on_stderr: Callback for stderr lines.

    Returns:
        Tuple of (exit_code, stdout, stderr, duration_ms).
    """
    run_env = os.environ.copy()
    if env:
        run_env.update(env)

    start_time = time.monotonic()

    try:
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=run_env,
            limit=STREAM_LIMIT,
        )
    except OSError as e:
        duration_ms = int((time.monotonic() - start_time) * 1000)
        return -1, "", str(e), duration_ms

    stdout_buffer: list[str] = []
    stderr_buffer: list[str] = []

    try:
        if process.stdout is None or process.stderr is None:
            raise RuntimeError("Process stdout/stderr is None")

        await asyncio.gather(
            _read_stream(process.stdout, on_stdout, stdout_buffer),
            _read_stream(process.stderr, on_stderr, stderr_buffer),
            process.wait(),
        )
    except (ValueError, RuntimeError) as e:
        # A line over STREAM_LIMIT leaves the reader unusable.
        if process.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
        await process.wait()
        stderr_buffer.append(f"{e}\n")
        duration_ms = int((time.monotonic() - start_time) * 1000)
        return -1, "".join(stdout_buffer), "".join(stderr_buffer), duration_ms

    duration_ms = int((time.monotonic() - start_time) * 1000)
    return process.returncode or 0, "".join(stdout_buffer), "".join(stderr_buffer), duration_ms


async def run_in_project(
    project: Project,
    command: str,
    *,
    env: dict[str, str] | None = None,
    reporter: CommandReporter | None = None,
) -> ExecutionResult:
    """Run a command in a project directory.

    Args:
        project: Project to run the command in.
        command: Shell command to execute.
        env: Additional environment variables.
        reporter: Progress callbacks.

    Returns:
        Execution result; a non-zero exit becomes a failure result.
    """
    reporter = reporter or CommandReporter()

    run_env = env.copy() if env else {}
    run_env["MONOKIT_PROJECT_NAME"] = project.name
    run_env["MONOKIT_PROJECT_PATH"] = str(project.path)

    def _on_out(line: str) -> None:
        reporter.output(project.name, line, False)

    def _on_err(line: str) -> None:
        reporter.output(project.name, line, True)

    reporter.started(project.name, command)
    exit_code, stdout, stderr, duration_ms = await run_command(
        command,
        cwd=project.path,
        env=run_env,
        on_stdout=_on_out,
        on_stderr=_on_err,
    )
    reporter.finished(project.name, command, exit_code)

    if exit_code == 0:
        return ExecutionResult.success_result(
            project.name,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            command=command,
        )
    return ExecutionResult.failure_result(
        project.name,
        exit_code,
        stdout=stdout,
        stderr=stderr,
        duration_ms=duration_ms,
        command=command,
    )
