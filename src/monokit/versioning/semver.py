"""Semantic version handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BumpType(IntEnum):
    """Magnitude of a version change, ordered by significance."""

    NONE = 0
    PATCH = 1
    MINOR = 2


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """A major.minor.patch version.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f"Version components must be non-negative: {self}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse "X.Y.Z".

        Args:
            text: Version string.

        Returns:
            Parsed version.

        Raises:
            ValueError: Unless text is exactly three dot-separated numbers.
        """
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid semantic version: {text!r}")
        major, minor, patch = (int(p) for p in parts)
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
