"""License text resolver.

Decides which license to fetch (explicit identifier, nearest manifest,
configured default) and fetches its text from the registry.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from oslicense.exceptions import NoLicenseSpecifiedError
from oslicense.models.config import ResolverConfig
from oslicense.resolvers.manifest import ManifestLicenseResolver
from oslicense.resolvers.registry import LicenseRegistryClient

logger = logging.getLogger(__name__)


class LicenseResolver:
    """Resolver that turns an optional license identifier into license text."""

    def __init__(
        self,
        registry: LicenseRegistryClient,
        manifest: Optional[ManifestLicenseResolver] = None,
        default_license: Optional[str] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            registry: Client used to fetch license text.
            manifest: Resolver for the license declared by the nearest
                manifest. Defaults to scanning from the working directory.
            default_license: Identifier to fall back to when neither an
                explicit identifier nor a manifest license is available.
                None means fail instead.
        """
        self._registry = registry
        self._manifest = manifest if manifest is not None else ManifestLicenseResolver()
        self._default_license = default_license

    @classmethod
    def from_config(
        cls, config: ResolverConfig, client: Optional[httpx.AsyncClient] = None
    ) -> LicenseResolver:
        """Build a resolver and its registry client from a ResolverConfig."""
        return cls(
            registry=LicenseRegistryClient.from_config(config, client=client),
            manifest=ManifestLicenseResolver(manifest_names=config.manifest_names),
            default_license=config.default_license,
        )

    def determine_identifier(self, explicit_identifier: Optional[str] = None) -> str:
        """Pick the license identifier to fetch.

        Args:
            explicit_identifier: Identifier given by the caller, if any.

        Returns:
            The explicit identifier, else the nearest manifest's license,
            else the configured default license.

        Raises:
            NoLicenseSpecifiedError: If no identifier can be determined.
        """
        if explicit_identifier:
            return explicit_identifier

        from_manifest = self._manifest.resolve()
        if from_manifest:
            logger.debug("Using license %r from project manifest", from_manifest)
            return from_manifest

        if self._default_license:
            logger.debug("Using configured default license %r", self._default_license)
            return self._default_license

        raise NoLicenseSpecifiedError(
            "No license specified and no project manifest declares one"
        )

    async def resolve(self, explicit_identifier: Optional[str] = None) -> str:
        """Resolve license text.

        Args:
            explicit_identifier: Identifier given by the caller, if any.

        Returns:
            The trimmed license text.

        Raises:
            NoLicenseSpecifiedError: If no identifier can be determined.
            OSLicenseError: Any error raised by the registry client.
        """
        identifier = self.determine_identifier(explicit_identifier)
        return await self._registry.fetch_license_text(identifier)
