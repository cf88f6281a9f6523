"""Configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from monokit.config.schema import MonokitConfig
from monokit.errors import ConfigurationError

CONFIG_FILENAME = "monokit.yaml"


def load_config(root: Path) -> MonokitConfig:
    """Load monokit.yaml from a workspace root.

    A missing file is not an error: the defaults describe a plain pnpm
    monorepo with a commit.log checkpoint.

    Args:
        root: Workspace root directory.

    Returns:
        Validated configuration.

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation.
    """
    path = root / CONFIG_FILENAME
    if not path.is_file():
        return MonokitConfig()

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

    if data is None:
        return MonokitConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Top level must be a mapping", path=path)

    try:
        return MonokitConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e), path=path) from e
