"""Pydantic data models for oslicense."""

from oslicense.models.config import ResolverConfig
from oslicense.models.license import LicenseRecord, LicenseTextVersion, sort_summary

__all__ = [
    "LicenseRecord",
    "LicenseTextVersion",
    "ResolverConfig",
    "sort_summary",
]
