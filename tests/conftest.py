"""Test configuration and fixtures for the Library API."""

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from library_api.api import create_app
from library_api.common import build_sort_registry
from library_api.config import LibrarySettings
from library_api.repositories import LibraryRepository, build_seed_authors


class RecordingUrlBuilder:
    """UrlBuilder that formats predictable URLs and records every call."""

    def __init__(self, base_url: str = "http://test"):
        self.base_url = base_url
        self.calls: List[Tuple[str, dict, dict]] = []

    def url_for(
        self,
        route_name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None
    ) -> str:
        path_params = dict(path_params or {})
        query_params = dict(query_params or {})
        self.calls.append((route_name, path_params, query_params))

        url = f"{self.base_url}/{route_name}"
        for key in sorted(path_params):
            url += f"/{path_params[key]}"
        if query_params:
            url += "?" + urlencode(query_params)
        return url


@pytest.fixture
def url_builder():
    """Recording URL builder."""
    return RecordingUrlBuilder()


@pytest.fixture
def sort_registry():
    """Sort mapping registry as built at startup."""
    return build_sort_registry()


@pytest.fixture
def settings():
    """Settings for a test application."""
    return LibrarySettings(environment="testing", seed_data=True)


@pytest.fixture
def repository():
    """In-memory store populated with the seed authors."""
    return LibraryRepository(build_seed_authors())


@pytest.fixture
def app(settings, repository):
    """Create FastAPI test app."""
    return create_app(settings, repository)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
