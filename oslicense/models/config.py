"""Configuration Pydantic models for oslicense."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from oslicense.constants import (
    API_ROOT,
    DEFAULT_MANIFEST_NAMES,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_TIMEOUT,
    TEXT_ROOT,
)


class ResolverConfig(BaseModel):
    """Configuration for oslicense.

    Built once at startup and passed explicitly to the resolver and
    the output writer.
    """

    model_config = {"extra": "forbid", "frozen": True}

    api_root: str = Field(
        default=API_ROOT,
        description="Base URL of the license registry API.",
    )
    text_root: str = Field(
        default=TEXT_ROOT,
        description="Base URL of the raw license text mirror.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds to wait for each HTTP request.",
    )
    default_license: Optional[str] = Field(
        default=None,
        min_length=1,
        description="License identifier to use when none is given and no "
        "manifest declares one. Unset means fail instead of guessing.",
    )
    manifest_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MANIFEST_NAMES),
        min_length=1,
        description="Manifest file names checked in each directory, in order.",
    )
    output_filename: str = Field(
        default=DEFAULT_OUTPUT_FILENAME,
        min_length=1,
        description="File name used when no output path is given.",
    )
