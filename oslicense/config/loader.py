"""Read ``.oslicense.yaml`` into a ResolverConfig."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from oslicense.exceptions import ConfigurationError
from oslicense.models.config import ResolverConfig

logger = logging.getLogger(__name__)

# Checked in order; the first one present wins
CONFIG_FILE_NAMES = (".oslicense.yaml", ".oslicense.yml")


def find_config_file(directory: Optional[Path] = None) -> Optional[Path]:
    """Return the config file in ``directory`` (default: cwd), if any."""
    base = directory or Path.cwd()
    return next(
        (base / name for name in CONFIG_FILE_NAMES if (base / name).is_file()),
        None,
    )


def _parse_yaml(path: Path) -> dict[str, Any]:
    """Read ``path`` and return its top-level mapping.

    An empty or comment-only file yields an empty mapping.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        document = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': expected a mapping of settings, "
            f"found {type(document).__name__}"
        )
    return document


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(map(str, item['loc'])) or 'root'}: {item['msg']}"
        for item in error.errors()
    )


def load_config_file(path: Path) -> ResolverConfig:
    """Build a ResolverConfig from a YAML file.

    Raises:
        ConfigurationError: The file is unreadable, is not a YAML mapping,
            or holds unknown keys or out-of-range values.
    """
    logger.debug("Loading configuration from %s", path)
    settings = _parse_yaml(path)
    try:
        return ResolverConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_describe(e)}"
        ) from e


def load_config(config_path: Optional[str] = None) -> ResolverConfig:
    """Load ``config_path``, else a discovered config file, else defaults."""
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return ResolverConfig()
    return load_config_file(path)
