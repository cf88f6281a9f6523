"""monokit commands."""

from monokit.commands.base import Command, CommandContext, SyncCommand
from monokit.commands.exec import ExecCommand, ExecOptions, exec_command
from monokit.commands.install import InstallCommand, InstallOptions, install
from monokit.commands.list import ListCommand, ListResult, ProjectInfo, list_projects
from monokit.commands.publish import (
    PublishCommand,
    PublishOptions,
    PublishResult,
    is_private,
    publish,
)
from monokit.commands.upgrade import (
    COMMIT_MESSAGE,
    ProjectFailure,
    ProjectUpgrade,
    UpgradeCommand,
    UpgradeOptions,
    UpgradeResult,
    upgrade,
)

__all__ = [
    # Base
    "Command",
    "SyncCommand",
    "CommandContext",
    # Exec
    "ExecCommand",
    "ExecOptions",
    "exec_command",
    # Install
    "InstallCommand",
    "InstallOptions",
    "install",
    # List
    "ListCommand",
    "ListResult",
    "ProjectInfo",
    "list_projects",
    # Publish
    "PublishCommand",
    "PublishOptions",
    "PublishResult",
    "is_private",
    "publish",
    # Upgrade
    "COMMIT_MESSAGE",
    "ProjectFailure",
    "ProjectUpgrade",
    "UpgradeCommand",
    "UpgradeOptions",
    "UpgradeResult",
    "upgrade",
]
