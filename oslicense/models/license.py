"""License record Pydantic models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class LicenseTextVersion(BaseModel):
    """A single version of a license's text as listed by the registry."""

    model_config = {"extra": "ignore", "frozen": True}

    url: Optional[str] = Field(
        default=None, description="Location of this version's text"
    )
    media_type: Optional[str] = Field(default=None, description="MIME type")
    title: Optional[str] = Field(default=None, description="Display title")


class LicenseRecord(BaseModel):
    """A license as described by the OSI license API.

    Only ``id`` is required. Keys the tool does not use (keywords, links,
    other_names, ...) are dropped, so their shape never fails validation.
    """

    model_config = {"extra": "ignore", "frozen": True}

    id: str = Field(min_length=1, description="Case-sensitive license identifier")
    name: Optional[str] = Field(default=None, description="Human-readable name")
    text: list[LicenseTextVersion] = Field(
        default_factory=list, description="Ordered text versions"
    )

    @field_validator("text", mode="before")
    @classmethod
    def _drop_missing_versions(cls, value: Any) -> Any:
        """Treat ``null`` as no versions and skip ``null`` entries."""
        if value is None:
            return []
        if isinstance(value, list):
            return [entry for entry in value if entry is not None]
        return value

    @property
    def display_name(self) -> str:
        """Name to show for this license, falling back to its identifier."""
        return self.name or self.id

    @property
    def first_text_url(self) -> Optional[str]:
        """URL of the first listed text version, if any."""
        if not self.text:
            return None
        return self.text[0].url


def sort_summary(summary: dict[str, str]) -> list[tuple[str, str]]:
    """Order a license summary case-insensitively by identifier.

    Args:
        summary: Mapping of license identifier to display name.

    Returns:
        List of (identifier, name) pairs.
    """
    return sorted(summary.items(), key=lambda item: item[0].lower())
