from enum import Enum


class ContentFormat(str, Enum):
    preview = "preview"
    gifpreview = "gifpreview"
    tinygifpreview = "tinygifpreview"
    nanogifpreview = "nanogifpreview"
    webppreview_transparent = "webppreview_transparent"
    tinywebppreview_transparent = "tinywebppreview_transparent"
    nanowebppreview_transparent = "nanowebppreview_transparent"
    gif = "gif"
    mediumgif = "mediumgif"
    tinygif = "tinygif"
    nanogif = "nanogif"
    mp4 = "mp4"
    loopedmp4 = "loopedmp4"
    tinymp4 = "tinymp4"
    nanomp4 = "nanomp4"
    webm = "webm"
    tinywebm = "tinywebm"
    nanowebm = "nanowebm"
    webp_transparent = "webp_transparent"
    tinywebp_transparent = "tinywebp_transparent"
    nanowebp_transparent = "nanowebp_transparent"
    gif_transparent = "gif_transparent"
    tinygif_transparent = "tinygif_transparent"
    nanogif_transparent = "nanogif_transparent"


# Formats that only carry a still preview image.
PREVIEW_CONTENT_FORMATS = frozenset({
    ContentFormat.preview,
    ContentFormat.gifpreview,
    ContentFormat.tinygifpreview,
    ContentFormat.nanogifpreview,
    ContentFormat.webppreview_transparent,
    ContentFormat.tinywebppreview_transparent,
    ContentFormat.nanowebppreview_transparent,
})


class AspectRatioRange(str, Enum):
    all = "all"
    wide = "wide"
    standard = "standard"


class ContentFilter(str, Enum):
    off = "off"
    low = "low"
    medium = "medium"
    high = "high"


class CategoryType(str, Enum):
    featured = "featured"
    trending = "trending"


class MediaFlag(str, Enum):
    audio = "audio"
    sticker = "sticker"
    static = "static"
