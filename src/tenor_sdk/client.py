"""High-level Tenor client composing HTTP and the API groups."""

from __future__ import annotations

from typing import Any, Sequence

from tenor_sdk.config import ClientOptions, get_api_key
from tenor_sdk.http import DEFAULT_BASE_URL, HTTPClient
from tenor_sdk.models.gifs import (
    CategoriesResponse,
    FeaturedResponse,
    GifCategory,
    PostsResponse,
    SearchResponse,
)
from tenor_sdk.models.terms import (
    AutocompleteResponse,
    SearchSuggestionsResponse,
    TrendingTermsResponse,
)


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("API_KEY", client_key="my_app", locale="en_US") as client:
            page = await client.search("excited", limit=8)
            categories = await client.categories()
            more = await client.search_by_category(categories.tags[0], limit=8)

    ``client_key``, ``country`` and ``locale`` become defaults for every
    request; any call may override them.
    """

    def __init__(
        self,
        key: str,
        *,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        options = ClientOptions(client_key=client_key, country=country, locale=locale)
        self.http = HTTPClient(key, options=options, base_url=base_url, timeout=timeout)

        self._gifs: Any = None
        self._terms: Any = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> Client:
        """Build a client from ``TENOR_API_KEY`` and the optional ``TENOR_*`` defaults."""
        options = ClientOptions.from_env()
        return cls(
            get_api_key(),
            client_key=options.client_key,
            country=options.country,
            locale=options.locale,
            **kwargs,
        )

    @property
    def options(self) -> ClientOptions:
        return self.http.options

    # --- API group properties ---

    @property
    def gifs(self) -> Any:
        if self._gifs is None:
            from tenor_sdk.api.gifs import GifsAPI
            self._gifs = GifsAPI(self.http)
        return self._gifs

    @property
    def terms(self) -> Any:
        if self._terms is None:
            from tenor_sdk.api.terms import SearchTermsAPI
            self._terms = SearchTermsAPI(self.http)
        return self._terms

    # --- Shortcuts, one per Tenor endpoint ---

    async def search_suggestions(self, search_term: str, **params: Any) -> SearchSuggestionsResponse:
        return await self.terms.suggestions(search_term, **params)

    async def autocomplete(self, search_term: str, **params: Any) -> AutocompleteResponse:
        return await self.terms.autocomplete(search_term, **params)

    async def trending_terms(self, **params: Any) -> TrendingTermsResponse:
        return await self.terms.trending(**params)

    async def search(self, search_term: str, **params: Any) -> SearchResponse:
        return await self.gifs.search(search_term, **params)

    async def search_by_category(self, category: GifCategory, **params: Any) -> SearchResponse:
        return await self.gifs.by_category(category, **params)

    async def get_gifs_by_id(self, ids: Sequence[str], **params: Any) -> PostsResponse:
        return await self.gifs.by_ids(ids, **params)

    async def featured(self, **params: Any) -> FeaturedResponse:
        return await self.gifs.featured(**params)

    async def categories(self, **params: Any) -> CategoriesResponse:
        return await self.gifs.categories(**params)

    async def register_share(self, id: str, **params: Any) -> bool:
        return await self.gifs.register_share(id, **params)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
