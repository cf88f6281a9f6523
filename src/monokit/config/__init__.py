"""Workspace configuration."""

from monokit.config.loader import CONFIG_FILENAME, load_config
from monokit.config.schema import CommandsConfig, MonokitConfig

__all__ = ["CONFIG_FILENAME", "CommandsConfig", "MonokitConfig", "load_config"]
