"""Version bump rules."""

from __future__ import annotations

from monokit.versioning.conventional import ClassificationCount
from monokit.versioning.semver import BumpType, Version


def determine_bump(counts: ClassificationCount) -> BumpType:
    """Decide the bump class; any feature commit wins over fixes."""
    if counts.feature_count > 0:
        return BumpType.MINOR
    if counts.fix_count > 0:
        return BumpType.PATCH
    return BumpType.NONE


def next_version(version: Version, counts: ClassificationCount) -> Version:
    """Compute the version that follows ``version`` for the given counts.

    A minor bump adds the feature count to minor and sets patch to the
    number of fixes released alongside it, discarding the previous patch
    value. A patch bump adds the fix count to patch. Major never changes.

    Args:
        version: Current version.
        counts: Commit classification for the project.

    Returns:
        The new version, or ``version`` itself when there is nothing to bump.
    """
    bump = determine_bump(counts)
    if bump is BumpType.MINOR:
        return Version(version.major, version.minor + counts.feature_count, counts.fix_count)
    if bump is BumpType.PATCH:
        return Version(version.major, version.minor, version.patch + counts.fix_count)
    return version
