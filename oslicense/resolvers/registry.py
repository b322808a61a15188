"""OSI license registry client."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from oslicense.constants import (
    API_LICENSE_PATH,
    API_LICENSES_PATH,
    API_ROOT,
    DEFAULT_TIMEOUT,
    TEXT_ROOT,
)
from oslicense.exceptions import (
    NetworkError,
    ParseError,
    RecordMalformedError,
    RegistryError,
    TextNotFoundError,
)
from oslicense.models.config import ResolverConfig
from oslicense.models.license import LicenseRecord

logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Invalid response received from the license registry"


def extract_error_messages(errors: Any) -> list[str]:
    """Collect the non-empty messages from a registry ``errors`` payload.

    Args:
        errors: Value of the ``errors`` key, normally a list of
            ``{"message": ...}`` objects.

    Returns:
        The messages, in order. May be empty if none carry a message.
    """
    if not isinstance(errors, list):
        errors = [errors]

    messages: list[str] = []
    for err in errors:
        message = err.get("message") if isinstance(err, dict) else err
        if isinstance(message, str) and message.strip():
            messages.append(message.strip())
    return messages


def raise_for_registry_errors(data: Any) -> None:
    """Raise RegistryError if a decoded response carries an error payload.

    Raises:
        RegistryError: If ``data`` has a non-empty ``errors`` entry.
    """
    if isinstance(data, dict) and data.get("errors"):
        raise RegistryError(extract_error_messages(data["errors"]))


class LicenseRegistryClient:
    """Client for the OSI license API and its raw license text mirror.

    License text is fetched from the text mirror by identifier rather than
    scraped from the pages the registry links to.
    """

    def __init__(
        self,
        api_root: str = API_ROOT,
        text_root: str = TEXT_ROOT,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_root: Base URL of the registry API.
            text_root: Base URL of the raw text mirror.
            timeout: Seconds to wait for each request.
            client: Optional shared httpx.AsyncClient for connection reuse.
        """
        self._api_root = api_root if api_root.endswith("/") else api_root + "/"
        self._text_root = text_root if text_root.endswith("/") else text_root + "/"
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_config(
        cls, config: ResolverConfig, client: Optional[httpx.AsyncClient] = None
    ) -> LicenseRegistryClient:
        """Build a client from a ResolverConfig."""
        return cls(
            api_root=config.api_root,
            text_root=config.text_root,
            timeout=config.timeout,
            client=client,
        )

    async def list_licenses(self) -> dict[str, str]:
        """Fetch the names of all licenses known to the registry.

        Returns:
            Mapping of license identifier to display name.

        Raises:
            NetworkError: If the request fails.
            ParseError: If the response is not a JSON list of licenses.
            RegistryError: If the registry returns an error payload.
        """
        data = await self._get_json(self._api_root + API_LICENSES_PATH)

        if not isinstance(data, list):
            raise ParseError(f"{INVALID_RESPONSE_MESSAGE}: expected a license list")

        licenses: dict[str, str] = {}
        for entry in data:
            try:
                record = LicenseRecord.model_validate(entry)
            except ValidationError as e:
                raise ParseError(
                    f"{INVALID_RESPONSE_MESSAGE}: malformed license entry"
                ) from e
            licenses[record.id] = record.display_name

        logger.debug("Registry listed %d licenses", len(licenses))
        return licenses

    async def fetch_license_record(self, identifier: str) -> LicenseRecord:
        """Fetch the registry record for a single license.

        Args:
            identifier: Case-sensitive license identifier (e.g. "MIT").

        Returns:
            The license record.

        Raises:
            NetworkError: If the request fails.
            ParseError: If the response is not valid JSON.
            RegistryError: If the registry returns an error payload.
            RecordMalformedError: If the identifier is empty or the
                response is not a usable license record.
        """
        if not isinstance(identifier, str) or not identifier:
            raise RecordMalformedError("Invalid license object or ID provided")

        url = self._api_root + API_LICENSE_PATH + quote(identifier, safe="")
        data = await self._get_json(url)

        try:
            return LicenseRecord.model_validate(data)
        except ValidationError as e:
            raise RecordMalformedError(
                f"Invalid license object returned for '{identifier}'"
            ) from e

    async def fetch_license_text(
        self, identifier_or_record: Union[str, LicenseRecord]
    ) -> str:
        """Fetch the plain text of a license.

        Args:
            identifier_or_record: License identifier, or a record already
                fetched with fetch_license_record().

        Returns:
            The license text with surrounding whitespace removed.

        Raises:
            NetworkError: If a request fails.
            ParseError: If the registry response is not valid JSON.
            RegistryError: If the registry returns an error payload.
            RecordMalformedError: If the license record is unusable.
            TextNotFoundError: If the mirror has no text for the license.
        """
        if isinstance(identifier_or_record, LicenseRecord):
            record = identifier_or_record
        else:
            record = await self.fetch_license_record(identifier_or_record)

        response = await self._get(self._text_root + quote(record.id, safe=""))
        if not response.is_success:
            raise TextNotFoundError(f"License text not found for '{record.id}'")

        text = response.text.strip()
        if not text:
            raise TextNotFoundError(f"License text for '{record.id}' is empty")
        return text

    async def _get_json(self, url: str) -> Any:
        """GET a registry URL and decode its JSON body.

        The status code is not checked: the registry reports failures
        through an ``errors`` payload.
        """
        response = await self._get(url)
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(INVALID_RESPONSE_MESSAGE) from e

        raise_for_registry_errors(data)
        return data

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)

        async def do_fetch(client: httpx.AsyncClient) -> httpx.Response:
            try:
                return await client.get(url, timeout=httpx.Timeout(self._timeout))
            except httpx.RequestError as e:
                raise NetworkError(f"Failed to fetch {url}: {e}") from e

        if self._client:
            return await do_fetch(self._client)

        async with httpx.AsyncClient() as new_client:
            return await do_fetch(new_client)
