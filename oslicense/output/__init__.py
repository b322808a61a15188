"""Output formatters and writers for oslicense."""

from oslicense.output.listing import LicenseListFormatter
from oslicense.output.listing_json import LicenseListJsonFormatter
from oslicense.output.writer import (
    echo_license,
    resolve_output_path,
    write_license_file,
)

__all__ = [
    "LicenseListFormatter",
    "LicenseListJsonFormatter",
    "echo_license",
    "resolve_output_path",
    "write_license_file",
]
