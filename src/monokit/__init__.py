"""monokit - maintenance toolkit for directories of sibling projects.

Provides:
- Project discovery under a workspace root
- Install / build / update / publish / exec across every project
- Automatic version bumps from conventional commit history
"""

from monokit.checkpoint import CheckpointStore, now_timestamp
from monokit.config import MonokitConfig, load_config
from monokit.errors import (
    CheckpointError,
    ConfigurationError,
    DiscoveryError,
    ExecutionError,
    GitError,
    ManifestError,
    MonokitError,
)
from monokit.execution import BatchResult, ExecutionResult, ExecutionStatus, ParallelExecutor
from monokit.workspace import Project, Workspace, discover_projects

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Workspace",
    "Project",
    "discover_projects",
    "MonokitConfig",
    "load_config",
    "CheckpointStore",
    "now_timestamp",
    # Execution
    "ExecutionResult",
    "ExecutionStatus",
    "BatchResult",
    "ParallelExecutor",
    # Errors
    "MonokitError",
    "ConfigurationError",
    "DiscoveryError",
    "ManifestError",
    "ExecutionError",
    "GitError",
    "CheckpointError",
]
