"""Semantic versioning from conventional commits."""

from monokit.versioning.bump import determine_bump, next_version
from monokit.versioning.conventional import (
    ClassificationCount,
    CommitKind,
    classify_commit,
    classify_commits,
)
from monokit.versioning.manifest import (
    VersionField,
    find_version,
    read_manifest,
    read_version,
    replace_version,
    write_manifest,
)
from monokit.versioning.semver import BumpType, Version

__all__ = [
    "BumpType",
    "ClassificationCount",
    "CommitKind",
    "Version",
    "VersionField",
    "classify_commit",
    "classify_commits",
    "determine_bump",
    "find_version",
    "next_version",
    "read_manifest",
    "read_version",
    "replace_version",
    "write_manifest",
]
