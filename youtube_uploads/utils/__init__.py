"""Utility modules for the uploads grid."""

from .channel import (
    build_feed_url,
    is_channel_handle,
    is_channel_id,
    normalize_channel_identifier,
)
from .youtube import (
    extract_video_id,
    get_channel_page_url,
    get_youtube_embed_url,
    get_youtube_thumbnail_url,
)

__all__ = [
    "build_feed_url",
    "is_channel_handle",
    "is_channel_id",
    "normalize_channel_identifier",
    "extract_video_id",
    "get_channel_page_url",
    "get_youtube_embed_url",
    "get_youtube_thumbnail_url",
]
