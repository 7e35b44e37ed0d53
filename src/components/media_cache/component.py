"""
Media cache component - Cache tags and contexts a media item must expose.

Pure functions. Every media item depends on its owner, the thumbnail image
style and its thumbnail file, and renders per timezone.
"""

from __future__ import annotations

from src.domain.entities import MediaItem

THUMBNAIL_STYLE_TAG = "config:image.style.thumbnail"
MEDIA_CACHE_CONTEXTS: tuple[str, ...] = ("timezone",)


def media_cache_tag(media: MediaItem) -> str:
    return f"media:{media.id}"


def additional_media_cache_tags(media: MediaItem) -> list[str]:
    """Tags beyond the entity's own tag."""
    return [
        f"user:{media.owner_id}",
        THUMBNAIL_STYLE_TAG,
        f"file:{media.thumbnail_file_id}",
    ]


def media_cache_tags(media: MediaItem) -> list[str]:
    """All cache tags for a media item, entity tag first."""
    return [media_cache_tag(media), *additional_media_cache_tags(media)]


def media_cache_contexts(media: MediaItem) -> list[str]:
    """Render contexts for a media item. The same for every item."""
    return list(MEDIA_CACHE_CONTEXTS)
