"""Search-term API methods: suggestions, autocomplete, trending terms."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenor_sdk.models.terms import (
    AutocompleteResponse,
    SearchSuggestionsResponse,
    TrendingTermsResponse,
)
from tenor_sdk.parameters import compact

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient


class SearchTermsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def suggestions(
        self,
        search_term: str,
        *,
        limit: int | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> SearchSuggestionsResponse:
        """Terms related to ``search_term`` that help narrow down a search."""
        params = compact(
            search_term=search_term, limit=limit, client_key=client_key, country=country, locale=locale
        )
        data = await self._http.get_endpoint("search_suggestions", params)
        return SearchSuggestionsResponse.model_validate(data)

    async def autocomplete(
        self,
        search_term: str,
        *,
        limit: int | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> AutocompleteResponse:
        """Completions for a partially typed ``search_term``."""
        params = compact(
            search_term=search_term, limit=limit, client_key=client_key, country=country, locale=locale
        )
        data = await self._http.get_endpoint("autocomplete", params)
        return AutocompleteResponse.model_validate(data)

    async def trending(
        self,
        *,
        limit: int | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> TrendingTermsResponse:
        params = compact(limit=limit, client_key=client_key, country=country, locale=locale)
        data = await self._http.get_endpoint("trending_terms", params)
        return TrendingTermsResponse.model_validate(data)
