"""SDK exception hierarchy."""

from __future__ import annotations

from typing import Any

import httpx
import pydantic

from tenor_sdk.models.errors import ErrorResponse


class TenorAPIError(Exception):
    """Raised when the Tenor API returns a non-2xx response.

    ``code`` and ``message`` are the values the remote sent, untouched.
    Transport and JSON decoding failures are not wrapped in this class; they
    surface as the httpx or :mod:`json` exception that caused them.
    """

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        code = error.code if error and error.code is not None else "UNKNOWN"
        msg = error.message if error and error.message else f"HTTP {status}"
        super().__init__(f"[{status}] {code}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response, body: Any) -> TenorAPIError:
        """Build from an httpx response and its already-decoded JSON body."""
        error: ErrorResponse | None = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            try:
                error = ErrorResponse.model_validate(body["error"])
            except pydantic.ValidationError:
                error = None
        return cls(status=response.status_code, error=error, response=response)

    @property
    def code(self) -> int | str | None:
        return self.error.code if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None
