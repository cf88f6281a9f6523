"""Persistence of the upgrade checkpoint timestamp."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from monokit.errors import CheckpointError


def now_timestamp(now: datetime | None = None) -> str:
    """Format a moment as UTC ISO-8601 with milliseconds, e.g. 2024-05-01T12:30:00.123Z."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CheckpointStore:
    """A single timestamp kept in a text file.

    The stored value marks the start of the commit window read by the next
    upgrade run.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str | None:
        """Return the stored timestamp, or None if there is none yet.

        Raises:
            CheckpointError: If the file exists but cannot be read.
        """
        try:
            value = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CheckpointError(f"Cannot read checkpoint {self.path}: {e}", path=self.path) from e
        return value or None

    def write(self, timestamp: str) -> None:
        """Overwrite the stored timestamp.

        Raises:
            CheckpointError: If the file cannot be written.
        """
        try:
            self.path.write_text(timestamp, encoding="utf-8")
        except OSError as e:
            raise CheckpointError(
                f"Cannot write checkpoint {self.path}: {e}", path=self.path
            ) from e

    def __repr__(self) -> str:
        return f"CheckpointStore({self.path!s})"
