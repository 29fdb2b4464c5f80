"""GIF API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from tenor_sdk.models.enums import AspectRatioRange, CategoryType, ContentFilter, ContentFormat
from tenor_sdk.models.gifs import (
    CategoriesResponse,
    FeaturedResponse,
    GifCategory,
    PostsResponse,
    RegisterShareResponse,
    SearchResponse,
)
from tenor_sdk.pagination import PaginatedIterator
from tenor_sdk.parameters import compact

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient

ContentFormats = Sequence[ContentFormat | str]


class GifsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def search(
        self,
        search_term: str,
        *,
        search_filter: Sequence[str] | None = None,
        content_filter: ContentFilter | str | None = None,
        content_formats: ContentFormats | None = None,
        aspect_ratio_range: AspectRatioRange | str | None = None,
        random_order: bool | None = None,
        limit: int | None = None,
        position_id: str | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> SearchResponse:
        """Search GIFs matching ``search_term``, ranked by relevance.

        Pass the previous response's ``next`` as ``position_id`` to get the
        following page, or use :meth:`paginate_search`.
        """
        params = compact(
            search_term=search_term,
            search_filter=search_filter,
            content_filter=content_filter,
            content_formats=content_formats,
            aspect_ratio_range=aspect_ratio_range,
            random_order=random_order,
            limit=limit,
            position_id=position_id,
            client_key=client_key,
            country=country,
            locale=locale,
        )
        data = await self._http.get_endpoint("search", params)
        return SearchResponse.model_validate(data)

    async def by_category(
        self,
        category: GifCategory,
        *,
        search_filter: Sequence[str] | None = None,
        content_formats: ContentFormats | None = None,
        aspect_ratio_range: AspectRatioRange | str | None = None,
        random_order: bool | None = None,
        limit: int | None = None,
        position_id: str | None = None,
        client_key: str | None = None,
        country: str | None = None,
    ) -> SearchResponse:
        """Search the GIFs behind a category returned by :meth:`categories`.

        The category's own query already fixes the search term, content
        filter and locale, so those cannot be passed here.
        """
        params = compact(
            search_filter=search_filter,
            content_formats=content_formats,
            aspect_ratio_range=aspect_ratio_range,
            random_order=random_order,
            limit=limit,
            position_id=position_id,
            client_key=client_key,
            country=country,
        )
        data = await self._http.get_category(category, params)
        return SearchResponse.model_validate(data)

    async def by_ids(
        self,
        ids: Sequence[str],
        *,
        content_formats: ContentFormats | None = None,
        client_key: str | None = None,
    ) -> PostsResponse:
        """Look up GIFs by id. Tenor expects at least one id."""
        params = compact(ids=list(ids), content_formats=content_formats, client_key=client_key)
        data = await self._http.get_endpoint("posts", params)
        return PostsResponse.model_validate(data)

    async def featured(
        self,
        *,
        search_filter: Sequence[str] | None = None,
        content_filter: ContentFilter | str | None = None,
        content_formats: ContentFormats | None = None,
        aspect_ratio_range: AspectRatioRange | str | None = None,
        limit: int | None = None,
        position_id: str | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> FeaturedResponse:
        params = compact(
            search_filter=search_filter,
            content_filter=content_filter,
            content_formats=content_formats,
            aspect_ratio_range=aspect_ratio_range,
            limit=limit,
            position_id=position_id,
            client_key=client_key,
            country=country,
            locale=locale,
        )
        data = await self._http.get_endpoint("featured", params)
        return FeaturedResponse.model_validate(data)

    async def categories(
        self,
        *,
        type: CategoryType | str | None = None,
        content_filter: ContentFilter | str | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> CategoriesResponse:
        params = compact(
            type=type, content_filter=content_filter, client_key=client_key, country=country, locale=locale
        )
        data = await self._http.get_endpoint("categories", params)
        return CategoriesResponse.model_validate(data)

    async def register_share(
        self,
        id: str,
        *,
        search_term: str | None = None,
        client_key: str | None = None,
        country: str | None = None,
        locale: str | None = None,
    ) -> bool:
        """Tell Tenor that the user shared GIF ``id``; returns the reported status."""
        params = compact(
            id=id, search_term=search_term, client_key=client_key, country=country, locale=locale
        )
        data = await self._http.get_endpoint("registershare", params)
        return RegisterShareResponse.model_validate(data).status

    # --- Pagination ---

    def paginate_search(self, search_term: str, *, page_size: int = 20, **filters: Any) -> PaginatedIterator:
        """Iterate every search result, following the ``next`` cursor.

        ``filters`` accepts the same keywords as :meth:`search`, except
        ``limit`` and ``position_id``, which the iterator manages.
        """
        params = compact(search_term=search_term, **filters)
        return PaginatedIterator(self._http, "search", params=params, limit=page_size)

    def paginate_featured(self, *, page_size: int = 20, **filters: Any) -> PaginatedIterator:
        return PaginatedIterator(self._http, "featured", params=compact(**filters), limit=page_size)
