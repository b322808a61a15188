"""Configuration handling for oslicense."""
from __future__ import annotations

from oslicense.config.loader import (
    CONFIG_FILE_NAMES,
    find_config_file,
    load_config,
    load_config_file,
)
from oslicense.models.config import ResolverConfig

__all__ = [
    "CONFIG_FILE_NAMES",
    "ResolverConfig",
    "find_config_file",
    "load_config",
    "load_config_file",
]
