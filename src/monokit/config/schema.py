"""Configuration schema for monokit.yaml."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CommandsConfig(BaseModel):
    """Package-manager commands used by the bulk workflows."""

    model_config = ConfigDict(extra="forbid")

    install: str = "pnpm install"
    build: str = "pnpm run build"
    update: str = "pnpm update"
    publish: str = "pnpm publish"
    pip_sync: str = "pipenv run pipenv sync"


class MonokitConfig(BaseModel):
    """Root configuration model.

    Attributes:
        manifest: File name that marks a directory as a project.
        checkpoint: Checkpoint file, relative to the workspace root.
        ignore: Glob patterns of project directories to skip.
        concurrency: Parallel jobs for bulk commands.
        fail_fast: Stop bulk commands on the first failure.
        env: Extra environment variables for every command.
        commands: Package-manager command lines.
    """

    model_config = ConfigDict(extra="forbid")

    manifest: str = "package.json"
    checkpoint: str = "commit.log"
    ignore: list[str] = Field(default_factory=list)
    concurrency: int = Field(default=4, ge=1)
    fail_fast: bool = False
    env: dict[str, str] = Field(default_factory=dict)
    commands: CommandsConfig = Field(default_factory=CommandsConfig)
