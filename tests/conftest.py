"""Shared fixtures for oslicense tests."""
from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from click.testing import CliRunner

from oslicense.constants import API_ROOT, TEXT_ROOT

MIT_TEXT = "MIT License\n\nPermission is hereby granted..."

MIT_RECORD: dict[str, Any] = {
    "id": "MIT",
    "name": "MIT/Expat License",
    "superseded_by": None,
    "keywords": ["osi-approved", "popular", "permissive"],
    "identifiers": [{"identifier": "MIT", "scheme": "SPDX"}],
    "links": [
        {"note": "tl;dr legal", "url": "https://tldrlegal.com/license/mit-license"}
    ],
    "other_names": [{"name": "MIT", "note": "Because MIT has used many licenses"}],
    "text": [
        {
            "media_type": "text/html",
            "title": "HTML",
            "url": "https://opensource.org/licenses/mit",
        }
    ],
}

LICENSE_LIST: list[dict[str, Any]] = [
    MIT_RECORD,
    {"id": "Apache-2.0", "name": "Apache License, Version 2.0"},
    {"id": "BSD-3-Clause", "name": "BSD 3-Clause License"},
]

Route = tuple[int, dict[str, Any]]


def license_url(identifier: str) -> str:
    """Registry URL of a single license record."""
    return f"{API_ROOT}license/{identifier}"


def text_url(identifier: str) -> str:
    """Text mirror URL of a license."""
    return f"{TEXT_ROOT}{identifier}"


class FakeRegistry:
    """httpx MockTransport handler serving canned responses by URL.

    Unknown URLs get a 404 with a registry-style error payload. Every
    requested URL is recorded in ``requests``.
    """

    def __init__(self, routes: dict[str, Route | Exception]) -> None:
        self.routes = routes
        self.requests: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)

        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, json={"errors": [{"message": "Not found"}]})
        if isinstance(route, Exception):
            raise route
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_registry() -> Callable[[dict[str, Route | Exception]], FakeRegistry]:
    """Factory for a FakeRegistry preloaded with the MIT license."""

    def make(routes: dict[str, Route | Exception] | None = None) -> FakeRegistry:
        defaults: dict[str, Route | Exception] = {
            f"{API_ROOT}licenses/": (200, {"json": LICENSE_LIST}),
            license_url("MIT"): (200, {"json": MIT_RECORD}),
            text_url("MIT"): (200, {"text": f"\n{MIT_TEXT}\n\n"}),
        }
        defaults.update(routes or {})
        return FakeRegistry(defaults)

    return make
