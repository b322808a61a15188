"""Custom exceptions for oslicense."""
from __future__ import annotations

from typing import Optional, Sequence


class OSLicenseError(Exception):
    """Base exception for all oslicense errors."""

    pass


class NetworkError(OSLicenseError):
    """Exception raised when a network request fails."""

    pass


class ParseError(OSLicenseError):
    """Exception raised when a registry response is not valid JSON."""

    pass


class RegistryError(OSLicenseError):
    """Exception raised when the registry returns an error payload.

    The individual messages from the payload are kept on ``messages``;
    the string form joins them one per line.
    """

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages: list[str] = [msg for msg in messages if msg]
        if not self.messages:
            self.messages = ["The license registry returned an error"]
        super().__init__("\n".join(self.messages))


class RecordMalformedError(OSLicenseError):
    """Exception raised when a license record has no usable data."""

    pass


class TextNotFoundError(OSLicenseError):
    """Exception raised when no license text could be fetched."""

    pass


class NoLicenseSpecifiedError(OSLicenseError):
    """Exception raised when no license identifier could be determined."""

    pass


class LicenseFileExistsError(OSLicenseError, FileExistsError):
    """Exception raised when the output license file already exists."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(f"License file already exists at '{path}'")


class FileWriteError(OSLicenseError):
    """Exception raised when the license file cannot be written."""

    pass


class ConfigurationError(OSLicenseError):
    """Exception raised when configuration is invalid."""

    pass
