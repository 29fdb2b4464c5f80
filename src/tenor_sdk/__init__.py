"""Tenor SDK: async Python client for the Tenor v2 GIF API."""

from tenor_sdk.client import Client
from tenor_sdk.config import ClientOptions
from tenor_sdk.errors import TenorAPIError
from tenor_sdk.models.enums import AspectRatioRange, CategoryType, ContentFilter, ContentFormat

__all__ = [
    "AspectRatioRange",
    "CategoryType",
    "Client",
    "ClientOptions",
    "ContentFilter",
    "ContentFormat",
    "TenorAPIError",
]
