"""
Media cache component - Media item cache metadata.
"""

from .component import (
    MEDIA_CACHE_CONTEXTS,
    THUMBNAIL_STYLE_TAG,
    additional_media_cache_tags,
    media_cache_contexts,
    media_cache_tag,
    media_cache_tags,
)

__all__ = [
    "MEDIA_CACHE_CONTEXTS",
    "THUMBNAIL_STYLE_TAG",
    "additional_media_cache_tags",
    "media_cache_contexts",
    "media_cache_tag",
    "media_cache_tags",
]
