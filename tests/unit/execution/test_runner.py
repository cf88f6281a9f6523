"""Test execution runner."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from monokit.execution import CommandReporter, ExecutionStatus
from monokit.execution.runner import run_command, run_in_project
from monokit.workspace import Project


@pytest.mark.asyncio
async def test_run_command_success():
    with patch("asyncio.create_subprocess_shell") as mock_create:
        process = AsyncMock()
        process.returncode = 0
        process.wait.return_value = None

        process.stdout = AsyncMock()
        process.stdout.readline.side_effect = [b"stdout\n", b""]
        process.stderr = AsyncMock()
        process.stderr.readline.side_effect = [b"stderr\n", b""]

        mock_create.return_value = process

        exit_code, stdout, stderr, duration = await run_command("echo test", cwd=Path("."))

        assert exit_code == 0
        assert stdout == "stdout\n"
        assert stderr == "stderr\n"
        assert duration >= 0


@pytest.mark.asyncio
async def test_run_command_callbacks():
    stdout_cb = MagicMock()
    stderr_cb = MagicMock()

    with patch("asyncio.create_subprocess_shell") as mock_create:
        process = AsyncMock()
        process.returncode = 0
        process.stdout = AsyncMock()
        process.stdout.readline.side_effect = [b"out\n", b""]
        process.stderr = AsyncMock()
        process.stderr.readline.side_effect = [b"err\n", b""]
        mock_create.return_value = process

        await run_command("cmd", cwd=Path("."), on_stdout=stdout_cb, on_stderr=stderr_cb)

        stdout_cb.assert_called_with("out")
        stderr_cb.assert_called_with("err")


@pytest.mark.asyncio
async def test_run_command_error():
    with patch("asyncio.create_subprocess_shell") as mock_create:
        process = AsyncMock()
        process.returncode = 1
        process.stdout.readline.side_effect = [b""]
        process.stderr.readline.side_effect = [b"error\n", b""]
        mock_create.return_value = process

        exit_code, stdout, stderr, duration = await run_command("fail", cwd=Path("."))

        assert exit_code == 1
        assert "error" in stderr


@pytest.mark.asyncio
async def test_run_command_spawn_failure():
    with patch("asyncio.create_subprocess_shell", side_effect=OSError("Boom")):
        exit_code, stdout, stderr, duration = await run_command("fail", cwd=Path("."))

        assert exit_code == -1
        assert "Boom" in stderr


async def test_run_command_real_shell(tmp_path: Path):
    exit_code, stdout, stderr, _ = await run_command(
        "echo $GREETING; echo oops >&2; exit 3", cwd=tmp_path, env={"GREETING": "hi"}
    )

    assert exit_code == 3
    assert stdout == "hi\n"
    assert stderr == "oops\n"


async def test_run_command_long_output_line(tmp_path: Path):
    script = f"\"{sys.executable}\" -c \"print('x' * 70000)\""

    exit_code, stdout, stderr, _ = await run_command(script, cwd=tmp_path)

    assert exit_code == 0
    assert stdout == "x" * 70000 + "\n"


async def test_run_command_line_over_limit(tmp_path: Path):
    script = f"\"{sys.executable}\" -c \"print('x' * 5000); print('done')\""

    with patch("monokit.execution.runner.STREAM_LIMIT", 1024):
        exit_code, stdout, stderr, _ = await run_command(script, cwd=tmp_path)

    assert exit_code == -1
    assert "limit" in stderr


@pytest.mark.asyncio
async def test_run_in_project():
    project = Project(name="web", path=Path("/path/to/web"))
    events = []
    reporter = CommandReporter(
        on_start=lambda name, cmd: events.append(("start", name, cmd)),
        on_exit=lambda name, cmd, code: events.append(("exit", name, cmd, code)),
    )

    with patch("monokit.execution.runner.run_command") as mock_run:
        mock_run.return_value = (0, "ok\n", "", 10)

        result = await run_in_project(project, "pnpm run build", reporter=reporter)

        assert result.success
        assert result.project_name == "web"
        assert result.command == "pnpm run build"
        assert result.stdout == "ok\n"

        call_kwargs = mock_run.call_args.kwargs
        assert call_kwargs["cwd"] == Path("/path/to/web")
        env = call_kwargs["env"]
        assert env["MONOKIT_PROJECT_NAME"] == "web"
        assert env["MONOKIT_PROJECT_PATH"] == "/path/to/web"

    assert events == [
        ("start", "web", "pnpm run build"),
        ("exit", "web", "pnpm run build", 0),
    ]


@pytest.mark.asyncio
async def test_run_in_project_failure():
    project = Project(name="web", path=Path("/path/to/web"))

    with patch("monokit.execution.runner.run_command") as mock_run:
        mock_run.return_value = (2, "", "boom", 5)

        result = await run_in_project(project, "pnpm install")

        assert result.status is ExecutionStatus.FAILURE
        assert result.failed
        assert result.exit_code == 2
        assert result.stderr == "boom"
