"""Error envelope returned by the Google API front end on non-2xx responses."""

from __future__ import annotations

from typing import Any

from tenor_sdk.models.base import TenorModel


class ErrorResponse(TenorModel):
    # Everything optional: a partial envelope must still surface as TenorAPIError.
    code: int | str | None = None
    message: str | None = None
    status: str | None = None
    details: list[dict[str, Any]] = []
