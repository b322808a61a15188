"""Project manifest license resolver.

Walks from a directory up to the filesystem root looking for a manifest
(package.json, pyproject.toml) that declares a license.
"""
from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

from oslicense.constants import DEFAULT_MANIFEST_NAMES

logger = logging.getLogger(__name__)


def locate_license_field(
    start_directory: Path | str,
    manifest_names: Sequence[str] = DEFAULT_MANIFEST_NAMES,
) -> Optional[str]:
    """Find the license declared by the nearest manifest.

    Checks ``start_directory`` and then each of its ancestors. Manifests
    that cannot be parsed or declare no license are skipped.

    Args:
        start_directory: Directory to start from.
        manifest_names: Manifest file names to check in each directory,
            in order of preference.

    Returns:
        The license identifier, or None if no manifest declares one.
    """
    directory = Path(start_directory).resolve()

    for current in (directory, *directory.parents):
        for name in manifest_names:
            manifest = current / name
            if not manifest.is_file():
                continue

            license_id = read_manifest_license(manifest)
            if license_id:
                logger.debug("Found license %r in %s", license_id, manifest)
                return license_id

    return None


def read_manifest_license(path: Path) -> Optional[str]:
    """Read the license field from a single manifest file.

    Args:
        path: Path to a package.json or pyproject.toml file.

    Returns:
        The non-empty license string, or None if the file can't be read,
        doesn't parse, or has no usable license field.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable manifest %s: %s", path, e)
        return None

    if path.suffix == ".toml":
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            logger.debug("Skipping invalid TOML manifest %s: %s", path, e)
            return None
        return _pyproject_license(data)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug("Skipping invalid JSON manifest %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        return None
    return _clean(data.get("license"))


def _pyproject_license(data: dict[str, Any]) -> Optional[str]:
    """Extract the license from parsed pyproject.toml data.

    Supports both ``license = "MIT"`` and ``license = {text = "MIT"}``.
    A ``{file = ...}`` table points at a file, not an identifier.
    """
    project = data.get("project")
    if not isinstance(project, dict):
        return None

    value = project.get("license")
    if isinstance(value, dict):
        value = value.get("text")
    return _clean(value)


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class ManifestLicenseResolver:
    """Resolver that reads the license declared by the nearest manifest."""

    def __init__(
        self,
        start_directory: Optional[Path] = None,
        manifest_names: Sequence[str] = DEFAULT_MANIFEST_NAMES,
    ) -> None:
        """Initialize the resolver.

        Args:
            start_directory: Directory to start scanning from. Defaults to
                the current working directory at resolve time.
            manifest_names: Manifest file names to check in each directory.
        """
        self._start_directory = start_directory
        self._manifest_names = list(manifest_names)

    def resolve(self) -> Optional[str]:
        """Resolve the license identifier from the nearest manifest.

        Returns:
            License identifier string, or None if no manifest declares one.
        """
        start = self._start_directory or Path.cwd()
        return locate_license_field(start, self._manifest_names)
