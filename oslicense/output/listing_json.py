"""JSON formatter for the list of available licenses."""
import json
from typing import Any

from oslicense import __version__
from oslicense.models.license import sort_summary


class LicenseListJsonFormatter:
    """Format the registry's license list as JSON."""

    def format_licenses(self, licenses: dict[str, str]) -> str:
        """Format available licenses as a JSON string.

        Args:
            licenses: Mapping of license identifier to display name.

        Returns:
            JSON document with tool metadata and the sorted license list.
        """
        output: dict[str, Any] = {
            "tool": {"name": "oslicense", "version": __version__},
            "total": len(licenses),
            "licenses": [
                {"id": license_id, "name": name}
                for license_id, name in sort_summary(licenses)
            ],
        }
        return json.dumps(output, indent=2)
