"""GIF, category, and share response models."""

from __future__ import annotations

from tenor_sdk.models.base import TenorModel


class Media(TenorModel):
    url: str
    duration: float = 0
    preview: str = ""
    dims: tuple[int, int] = (0, 0)
    size: int = 0

    @property
    def width(self) -> int:
        return self.dims[0]

    @property
    def height(self) -> int:
        return self.dims[1]


class Gif(TenorModel):
    id: str
    title: str = ""
    # Keyed by content format name; only the formats requested come back.
    media_formats: dict[str, Media] = {}
    created: float = 0
    content_description: str = ""
    itemurl: str = ""
    url: str = ""
    tags: list[str] = []
    flags: list[str] = []
    hasaudio: bool = False
    content_description_source: str = ""
    bg_color: str | None = None
    hascaption: bool | None = None


class GifCategory(TenorModel):
    searchterm: str
    path: str
    image: str = ""
    name: str = ""


class SearchResponse(TenorModel):
    results: list[Gif]
    next: str = ""


class FeaturedResponse(TenorModel):
    locale: str = ""
    results: list[Gif]
    next: str = ""


class PostsResponse(TenorModel):
    results: list[Gif]


class CategoriesResponse(TenorModel):
    locale: str = ""
    tags: list[GifCategory]


class RegisterShareResponse(TenorModel):
    status: bool
