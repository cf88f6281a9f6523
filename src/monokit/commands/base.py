"""Base command infrastructure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from monokit.execution.reporting import CommandReporter
from monokit.workspace import Workspace

TResult = TypeVar("TResult")


@dataclass
class CommandContext:
    """Context passed to all commands.

    Attributes:
        workspace: The workspace instance.
        dry_run: If True, show what would happen without making changes.
        env: Extra environment variables for spawned commands.
        reporter: Progress callbacks for spawned commands.
    """

    workspace: Workspace
    dry_run: bool = False
    env: dict[str, str] = field(default_factory=dict)
    reporter: CommandReporter = field(default_factory=CommandReporter)

    def command_env(self) -> dict[str, str]:
        """Environment for spawned commands: workspace config, then context overrides."""
        env = dict(self.workspace.config.env)
        env.update(self.env)
        return env


class Command(ABC, Generic[TResult]):
    """Base class for all monokit commands.

    Commands encapsulate the logic for a specific operation.
    They receive a context and return a result.
    """

    def __init__(self, context: CommandContext) -> None:
        self.context = context
        self.workspace = context.workspace

    @abstractmethod
    async def execute(self) -> TResult:
        """Execute the command."""
        ...


class SyncCommand(ABC, Generic[TResult]):
    """Base class for synchronous commands."""

    def __init__(self, context: CommandContext) -> None:
        self.context = context
        self.workspace = context.workspace

    @abstractmethod
    def execute(self) -> TResult:
        """Execute the command synchronously."""
        ...
