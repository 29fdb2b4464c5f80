"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from tenor_sdk.config import ClientOptions
from tenor_sdk.http import HTTPClient

BASE_URL = "https://tenor.test/v2"


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={"results": [], "next": ""})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "query": request.url.query.decode(),
                "params": dict(request.url.params),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport and no client-wide defaults."""
    transport, calls = mock_transport
    client = HTTPClient("test-key", base_url=BASE_URL)
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(transport=transport)
    return client, transport, calls


@pytest.fixture
def configured_http_client(mock_transport):
    """HTTPClient carrying client_key/country/locale defaults."""
    transport, calls = mock_transport
    options = ClientOptions(client_key="my_app", country="US", locale="en_US")
    client = HTTPClient("test-key", options=options, base_url=BASE_URL)
    client._client = httpx.AsyncClient(transport=transport)
    return client, transport, calls
