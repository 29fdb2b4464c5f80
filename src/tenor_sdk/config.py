"""Client-wide defaults applied to every request."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

_ENV_PREFIX = "TENOR_"


@dataclass(frozen=True)
class ClientOptions:
    """Defaults set once at construction and read by every call.

    Per-call parameters with the same name take precedence.
    """

    client_key: str | None = None
    country: str | None = None
    locale: str | None = None

    def as_parameters(self) -> dict[str, Any]:
        """Only the options that were actually set."""
        return {name: value for name, value in asdict(self).items() if value is not None}

    @classmethod
    def from_env(cls) -> ClientOptions:
        """Read ``TENOR_CLIENT_KEY``, ``TENOR_COUNTRY`` and ``TENOR_LOCALE``."""
        return cls(
            client_key=os.getenv(f"{_ENV_PREFIX}CLIENT_KEY") or None,
            country=os.getenv(f"{_ENV_PREFIX}COUNTRY") or None,
            locale=os.getenv(f"{_ENV_PREFIX}LOCALE") or None,
        )


def get_api_key() -> str:
    key = os.getenv(f"{_ENV_PREFIX}API_KEY")
    if not key:
        raise RuntimeError("TENOR_API_KEY is not set; pass the key to Client() explicitly instead.")
    return key
