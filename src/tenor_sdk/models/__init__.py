"""SDK response models."""

from tenor_sdk.models.base import TenorModel
from tenor_sdk.models.errors import ErrorResponse

from tenor_sdk.models.enums import (
    PREVIEW_CONTENT_FORMATS,
    AspectRatioRange,
    CategoryType,
    ContentFilter,
    ContentFormat,
    MediaFlag,
)
from tenor_sdk.models.gifs import (
    CategoriesResponse,
    FeaturedResponse,
    Gif,
    GifCategory,
    Media,
    PostsResponse,
    RegisterShareResponse,
    SearchResponse,
)
from tenor_sdk.models.terms import (
    AutocompleteResponse,
    SearchSuggestionsResponse,
    TrendingTermsResponse,
)

__all__ = [
    "TenorModel",
    "ErrorResponse",
    # enums
    "PREVIEW_CONTENT_FORMATS",
    "AspectRatioRange",
    "CategoryType",
    "ContentFilter",
    "ContentFormat",
    "MediaFlag",
    # gifs
    "CategoriesResponse",
    "FeaturedResponse",
    "Gif",
    "GifCategory",
    "Media",
    "PostsResponse",
    "RegisterShareResponse",
    "SearchResponse",
    # terms
    "AutocompleteResponse",
    "SearchSuggestionsResponse",
    "TrendingTermsResponse",
]
