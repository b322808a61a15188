"""License resolvers package."""

from oslicense.resolvers.license import LicenseResolver
from oslicense.resolvers.manifest import ManifestLicenseResolver, locate_license_field
from oslicense.resolvers.registry import LicenseRegistryClient

__all__ = [
    "LicenseRegistryClient",
    "LicenseResolver",
    "ManifestLicenseResolver",
    "locate_license_field",
]
