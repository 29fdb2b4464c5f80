"""Async iterator for Tenor's ``next``/``pos`` cursor pagination."""

from __future__ import annotations

from collections import deque
from typing import Any, AsyncIterator

from tenor_sdk.http import HTTPClient
from tenor_sdk.models.gifs import Gif


class PaginatedIterator(AsyncIterator[Gif]):
    """Yields GIFs across cursor-paginated ``search`` or ``featured`` responses.

    Each page's ``next`` value is sent back as ``position_id`` on the
    following request. Iteration stops at an empty cursor, an empty page,
    or a cursor that comes back unchanged.
    """

    def __init__(
        self,
        http: HTTPClient,
        resource: str,
        *,
        params: dict[str, Any] | None = None,
        limit: int = 20,
    ) -> None:
        self._http = http
        self._resource = resource
        self._params = {**(params or {}), "limit": limit}
        self._pending: deque[Gif] = deque()
        self._position: str | None = None
        self._done = False
        self.pages_fetched = 0

    def __aiter__(self) -> AsyncIterator[Gif]:
        return self

    async def __anext__(self) -> Gif:
        while not self._pending:
            if self._done:
                raise StopAsyncIteration
            self._pending.extend(await self.next_page())
        return self._pending.popleft()

    async def next_page(self) -> list[Gif]:
        """Fetch one page and advance the cursor; ``[]`` once exhausted."""
        if self._done:
            return []
        params = dict(self._params)
        if self._position:
            params["position_id"] = self._position
        data = await self._http.get_endpoint(self._resource, params)
        self.pages_fetched += 1

        page = [Gif.model_validate(item) for item in data.get("results", [])]
        position = data.get("next") or None
        self._done = not page or position is None or position == self._position
        self._position = position
        return page

    async def flatten(self) -> list[Gif]:
        """Consume the full iterator into a list."""
        return [gif async for gif in self]
