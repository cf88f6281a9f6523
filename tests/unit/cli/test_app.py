"""Tests for CLI application entry point using CliRunner."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from monokit.cli.app import app
from monokit.commands import ProjectFailure, ProjectUpgrade, UpgradeResult
from monokit.execution import BatchResult, ExecutionResult
from monokit.versioning import BumpType, ClassificationCount

runner = CliRunner()


def test_version_flag():
    with patch("monokit.__version__", "1.2.3"):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "monokit 1.2.3" in result.stdout


def test_list_json(workspace_dir: Path):
    result = runner.invoke(app, ["list", "--json", "--root", str(workspace_dir)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [p["name"] for p in data] == ["api", "tools", "web"]
    assert data[0]["version"] == "1.2.3"


def test_list_table(workspace_dir: Path):
    result = runner.invoke(app, ["list", "-r", str(workspace_dir)])

    assert result.exit_code == 0
    assert "web" in result.stdout


def test_missing_root(tmp_path: Path):
    result = runner.invoke(app, ["list", "--root", str(tmp_path / "nope")])

    assert result.exit_code == 1


def test_exec_runs_everywhere(workspace_dir: Path):
    result = runner.invoke(app, ["exec", "echo hi", "-r", str(workspace_dir)])

    assert result.exit_code == 0
    assert "All 3 commands succeeded" in result.stdout
    assert "finished with code" in result.stdout


def test_exec_failure_exits_non_zero(workspace_dir: Path):
    result = runner.invoke(app, ["exec", "exit 4", "-r", str(workspace_dir), "--scope", "web"])

    assert result.exit_code == 1


def test_build_uses_configured_command(workspace_dir: Path):
    with patch("monokit.commands.exec_command", new_callable=AsyncMock) as mock_exec:
        mock_exec.return_value = BatchResult([ExecutionResult.success_result("web")])

        result = runner.invoke(app, ["build", "-r", str(workspace_dir), "-c", "2"])

        assert result.exit_code == 0
        args, kwargs = mock_exec.call_args
        assert args[1] == "pnpm run build"
        assert kwargs["concurrency"] == 2
        assert kwargs["fail_fast"] is None


def test_update_uses_configured_command(workspace_dir: Path):
    with patch("monokit.commands.exec_command", new_callable=AsyncMock) as mock_exec:
        mock_exec.return_value = BatchResult([ExecutionResult.failure_result("web", 1)])

        result = runner.invoke(app, ["update", "-r", str(workspace_dir), "--fail-fast"])

        assert result.exit_code == 1
        assert mock_exec.call_args.args[1] == "pnpm update"
        assert mock_exec.call_args.kwargs["fail_fast"] is True


def test_install_invocation(workspace_dir: Path):
    with patch("monokit.commands.install", new_callable=AsyncMock) as mock_install:
        mock_install.return_value = BatchResult([ExecutionResult.success_result("web")])

        result = runner.invoke(app, ["install", "-r", str(workspace_dir), "--skip-pip"])

        assert result.exit_code == 0
        assert mock_install.call_args.kwargs["skip_pip"] is True


def test_publish_dry_run(workspace_dir: Path):
    result = runner.invoke(app, ["publish", "-r", str(workspace_dir), "--dry-run"])

    assert result.exit_code == 0
    assert "tools: private, skipped" in result.stdout
    assert "- api" in result.stdout


def upgrade_result(**kwargs) -> UpgradeResult:
    return UpgradeResult(
        upgrades=[
            ProjectUpgrade(
                name="web",
                old_version="2.0.0",
                new_version="2.1.0",
                bump_type=BumpType.MINOR,
                counts=ClassificationCount(1, 0),
            )
        ],
        **kwargs,
    )


def test_upgrade_success(workspace_dir: Path):
    with patch("monokit.commands.upgrade", new_callable=AsyncMock) as mock_upgrade:
        mock_upgrade.return_value = upgrade_result(
            checkpoint="2024-06-01T08:00:00.000Z", checkpoint_written=True
        )

        result = runner.invoke(app, ["upgrade", "-r", str(workspace_dir), "--since", "2024-01-01"])

        assert result.exit_code == 0
        assert "2.1.0" in result.stdout
        assert "2024-06-01T08:00:00.000Z" in result.stdout
        assert mock_upgrade.call_args.kwargs["since"] == "2024-01-01"
        assert mock_upgrade.call_args.kwargs["dry_run"] is False
        assert mock_upgrade.call_args.kwargs["verbose"] is False


def test_upgrade_failure_exits_non_zero(workspace_dir: Path):
    with patch("monokit.commands.upgrade", new_callable=AsyncMock) as mock_upgrade:
        mock_upgrade.return_value = upgrade_result(
            failures=[ProjectFailure("api", "Manifest has no version field")]
        )

        result = runner.invoke(app, ["upgrade", "-r", str(workspace_dir)])

        assert result.exit_code == 1


def test_upgrade_nothing_to_do(workspace_dir: Path):
    with patch("monokit.commands.upgrade", new_callable=AsyncMock) as mock_upgrade:
        mock_upgrade.return_value = UpgradeResult()

        result = runner.invoke(app, ["upgrade", "-r", str(workspace_dir), "--dry-run"])

        assert result.exit_code == 0
        assert "No projects require a version bump" in result.stdout


def test_upgrade_verbose_flag(workspace_dir: Path):
    with patch("monokit.commands.upgrade", new_callable=AsyncMock) as mock_upgrade:
        mock_upgrade.return_value = UpgradeResult()

        result = runner.invoke(app, ["upgrade", "-r", str(workspace_dir), "-v"])

        assert result.exit_code == 0
        assert mock_upgrade.call_args.kwargs["verbose"] is True
