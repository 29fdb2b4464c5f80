"""Translation of keyword parameters into Tenor query strings."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

import httpx

# Only names whose wire form differs are listed; everything else passes through.
RENAMED_PARAMETERS: Mapping[str, str] = MappingProxyType({
    "aspect_ratio_range": "ar_range",
    "content_filter": "contentfilter",
    "content_formats": "media_filter",
    "position_id": "pos",
    "random_order": "random",
    "search_filter": "searchfilter",
    "search_term": "q",
})


def rename_parameters(parameters: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``parameters`` keyed by wire names."""
    return MappingProxyType({
        RENAMED_PARAMETERS.get(name, name): value for name, value in parameters.items()
    })


def _to_query_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_query_value(item) for item in value)
    return str(value)


def create_url_parameters(parameters: Mapping[str, Any]) -> httpx.QueryParams:
    """Build query params from wire-named ``parameters``.

    Falsy values (``None``, ``""``, ``0``, ``False``) and empty sequences are
    left out entirely. A non-empty sequence becomes a single comma-joined value.
    """
    items: list[tuple[str, str]] = []
    for name, value in parameters.items():
        if not value:
            continue
        items.append((name, _to_query_value(value)))
    return httpx.QueryParams(items)


def build_query(parameters: Mapping[str, Any]) -> str:
    """Rename and serialize ``parameters`` into a percent-encoded query string."""
    return str(create_url_parameters(rename_parameters(parameters)))


def compact(**parameters: Any) -> dict[str, Any]:
    """Keyword arguments minus the ones left at ``None``."""
    return {name: value for name, value in parameters.items() if value is not None}
