"""Conventional commit classification."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

# Matches "feat:" and "feat(scope):" at the start of a subject.
FEATURE_PATTERN = re.compile(r"^feat(?:\(.+\))?:")
FIX_PATTERN = re.compile(r"^fix(?:\(.+\))?:")


class CommitKind(Enum):
    """Classification of a single commit subject."""

    FEATURE = "feature"
    FIX = "fix"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class ClassificationCount:
    """Feature and fix commit counts for one project.

    Attributes:
        feature_count: Number of feat commits.
        fix_count: Number of fix commits.
    """

    feature_count: int = 0
    fix_count: int = 0


def classify_commit(subject: str) -> CommitKind:
    """Classify a commit subject by its conventional commit prefix.

    ``feat`` is checked before ``fix``; anything else is unrecognized.

    Args:
        subject: Commit subject line.

    Returns:
        The commit kind.
    """
    subject = subject.strip()
    if FEATURE_PATTERN.match(subject):
        return CommitKind.FEATURE
    if FIX_PATTERN.match(subject):
        return CommitKind.FIX
    return CommitKind.UNRECOGNIZED


def classify_commits(subjects: Iterable[str]) -> ClassificationCount:
    """Count feature and fix commits.

    Each line is trimmed and blank lines are dropped. A line may hold several
    subjects separated by newlines.

    Args:
        subjects: Commit subject lines.

    Returns:
        The counts.
    """
    features = fixes = 0
    for chunk in subjects:
        for line in chunk.splitlines():
            kind = classify_commit(line)
            if kind is CommitKind.FEATURE:
                features += 1
            elif kind is CommitKind.FIX:
                fixes += 1
    return ClassificationCount(feature_count=features, fix_count=fixes)
