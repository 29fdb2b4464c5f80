"""HTTP client wrapping httpx with parameter merging and error decoding."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

import httpx

from tenor_sdk.config import ClientOptions
from tenor_sdk.errors import TenorAPIError
from tenor_sdk.parameters import build_query

if TYPE_CHECKING:
    from tenor_sdk.models.gifs import GifCategory

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://tenor.googleapis.com/v2"

RESOURCES = frozenset({
    "search",
    "featured",
    "categories",
    "search_suggestions",
    "autocomplete",
    "trending_terms",
    "registershare",
    "posts",
})


class HTTPClient:
    """Async HTTP client for the Tenor v2 REST API."""

    def __init__(
        self,
        key: str,
        *,
        options: ClientOptions | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._key = key
        self._options = options or ClientOptions()
        # Trailing slash so relative resource paths resolve under the version prefix.
        self._root = httpx.URL(self.base_url + "/")
        self._client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    @property
    def options(self) -> ClientOptions:
        return self._options

    def combine_parameters(self, parameters: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        """Merge the access key, client defaults and per-call parameters, in that order."""
        return MappingProxyType({
            "key": self._key,
            **self._options.as_parameters(),
            **(parameters or {}),
        })

    def _url(self, path: str) -> httpx.URL:
        return self._root.join(path)

    async def fetch(self, path: str) -> Any:
        """GET ``path`` relative to the API root and return the decoded JSON body.

        Raises :class:`TenorAPIError` for non-2xx statuses. Transport errors
        and malformed JSON propagate from httpx unchanged.
        """
        url = self._url(path)
        log.debug("GET %s", url.copy_set_param("key", "***") if "key" in url.params else url)

        response = await self._client.get(url)
        body = response.json()

        if not response.is_success:
            error = TenorAPIError.from_response(response, body)
            log.warning("Tenor API error on %s: %s", url.path, error)
            raise error

        return body

    async def get_endpoint(self, resource: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """Fetch a named resource with the merged, wire-encoded parameters."""
        if resource not in RESOURCES:
            raise ValueError(f"Unknown Tenor resource: {resource!r}")
        return await self.fetch(f"{resource}?{build_query(self.combine_parameters(parameters))}")

    async def get_category(
        self, category: GifCategory, parameters: Mapping[str, Any] | None = None
    ) -> Any:
        """Fetch the GIFs behind a category.

        The category path already carries a query string built by Tenor, so
        the merged parameters are appended to it with ``&``.
        """
        return await self.fetch(f"{category.path}&{build_query(self.combine_parameters(parameters))}")

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
