"""Command execution."""

from monokit.execution.parallel import ParallelExecutor
from monokit.execution.reporting import CommandReporter
from monokit.execution.results import BatchResult, ExecutionResult, ExecutionStatus
from monokit.execution.runner import run_command, run_in_project

__all__ = [
    "BatchResult",
    "CommandReporter",
    "ExecutionResult",
    "ExecutionStatus",
    "ParallelExecutor",
    "run_command",
    "run_in_project",
]
