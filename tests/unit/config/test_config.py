"""Tests for configuration schema and loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from monokit.config import CommandsConfig, MonokitConfig, load_config
from monokit.errors import ConfigurationError


class TestMonokitConfig:
    """Tests for MonokitConfig."""

    def test_defaults(self) -> None:
        config = MonokitConfig()
        assert config.manifest == "package.json"
        assert config.checkpoint == "commit.log"
        assert config.ignore == []
        assert config.concurrency == 4
        assert config.fail_fast is False
        assert config.env == {}
        assert config.commands == CommandsConfig()

    def test_default_commands(self) -> None:
        commands = CommandsConfig()
        assert commands.install == "pnpm install"
        assert commands.build == "pnpm run build"
        assert commands.update == "pnpm update"
        assert commands.publish == "pnpm publish"
        assert commands.pip_sync == "pipenv run pipenv sync"

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            MonokitConfig.model_validate({"manifests": "package.json"})

    def test_rejects_zero_concurrency(self) -> None:
        with pytest.raises(ValidationError):
            MonokitConfig(concurrency=0)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, temp_dir: Path) -> None:
        assert load_config(temp_dir) == MonokitConfig()

    def test_empty_file_gives_defaults(self, temp_dir: Path) -> None:
        (temp_dir / "monokit.yaml").write_text("", encoding="utf-8")
        assert load_config(temp_dir) == MonokitConfig()

    def test_partial_override(self, temp_dir: Path) -> None:
        (temp_dir / "monokit.yaml").write_text(
            "concurrency: 8\ncommands:\n  build: npm run build\n", encoding="utf-8"
        )
        config = load_config(temp_dir)
        assert config.concurrency == 8
        assert config.commands.build == "npm run build"
        assert config.commands.install == "pnpm install"

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        (temp_dir / "monokit.yaml").write_text("concurrency: [1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(temp_dir)

    def test_non_mapping(self, temp_dir: Path) -> None:
        (temp_dir / "monokit.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(temp_dir)

    def test_validation_error(self, temp_dir: Path) -> None:
        (temp_dir / "monokit.yaml").write_text("concurrency: many\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(temp_dir)
        assert exc_info.value.path == temp_dir / "monokit.yaml"
