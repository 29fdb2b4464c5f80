"""Search-term response models."""

from __future__ import annotations

from tenor_sdk.models.base import TenorModel


class SearchSuggestionsResponse(TenorModel):
    locale: str = ""
    results: list[str]


class AutocompleteResponse(TenorModel):
    locale: str = ""
    results: list[str]


class TrendingTermsResponse(TenorModel):
    locale: str = ""
    results: list[str]
