"""Reading and rewriting the version field of a manifest file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from monokit.errors import ManifestError
from monokit.versioning.semver import Version

VERSION_FIELD_PATTERN = re.compile(r'"version"\s*:\s*"(?P<version>[^"]*)"')


@dataclass(frozen=True, slots=True)
class VersionField:
    """Location and value of the version field in manifest text.

    Attributes:
        version: Parsed version.
        start: Offset of the first character of the value.
        end: Offset just past the last character of the value.
    """

    version: Version
    start: int
    end: int


def find_version(text: str, path: Path | None = None) -> VersionField:
    """Locate and parse the first ``"version": "X.Y.Z"`` field.

    Args:
        text: Manifest content.
        path: Manifest path, for error messages.

    Returns:
        The located field.

    Raises:
        ManifestError: If there is no version field or its value is not a
            three-component version.
    """
    match = VERSION_FIELD_PATTERN.search(text)
    if match is None:
        raise ManifestError("Manifest has no version field", path=path)

    try:
        version = Version.parse(match.group("version"))
    except ValueError as e:
        raise ManifestError(str(e), path=path) from e

    return VersionField(version=version, start=match.start("version"), end=match.end("version"))


def replace_version(text: str, version: Version, path: Path | None = None) -> str:
    """Return ``text`` with only the version value replaced."""
    field = find_version(text, path)
    return text[: field.start] + str(version) + text[field.end :]


def read_manifest(path: Path) -> str:
    """Read a manifest without newline translation.

    Raises:
        ManifestError: If the file cannot be read.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest ({e})", path=path) from e


def write_manifest(path: Path, text: str) -> None:
    """Overwrite a manifest, byte for byte.

    Raises:
        ManifestError: If the file cannot be written.
    """
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot write manifest ({e})", path=path) from e


def read_version(path: Path) -> Version:
    """Read the version declared by a manifest file."""
    return find_version(read_manifest(path), path).version
