"""
Configuration for the uploads grid.

Display and cache settings come from the ``YOUTUBE_UPLOADS`` dict in Django
settings and are read into an immutable ``UploadsGridConfig`` which is passed
explicitly to the service and the renderer.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

# ==================== YouTube Endpoints ====================

# Public Atom feed of a channel's uploads (no API key required)
FEED_BASE_URL = "https://www.youtube.com/feeds/videos.xml"

# Thumbnail image host
THUMBNAIL_BASE_URL = "https://i.ytimg.com/vi"

# Embedded player
EMBED_BASE_URL = "https://www.youtube.com/embed"

# ==================== HTTP Settings ====================

USER_AGENT = getattr(
    settings,
    "YOUTUBE_UPLOADS_USER_AGENT",
    "Mozilla/5.0 (compatible; TubeGridBot/1.0; +https://www.youtube.com/feeds)",
)

# ==================== Defaults ====================

DEFAULT_CHANNEL_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"

# Grid column classes shipped in grid.css
MIN_COLUMNS = 1
MAX_COLUMNS = 4


@dataclass(frozen=True)
class UploadsGridConfig:
    """Display and caching settings for one uploads grid."""

    item_count: int = 12
    column_count: int = 3
    cache_hours: int = 2
    min_cache_seconds: int = 300  # Floor for misconfigured cache_hours
    default_channel: str = DEFAULT_CHANNEL_ID
    fetch_timeout: int = 10
    fetch_retries: int = 1
    cache_version: str = "v120"  # Bump to invalidate cached item lists

    def __post_init__(self):
        if self.item_count < 1:
            raise ImproperlyConfigured("YOUTUBE_UPLOADS['item_count'] must be at least 1")
        if not MIN_COLUMNS <= self.column_count <= MAX_COLUMNS:
            raise ImproperlyConfigured(
                f"YOUTUBE_UPLOADS['column_count'] must be between {MIN_COLUMNS} and {MAX_COLUMNS}"
            )
        if self.cache_hours < 0 or self.min_cache_seconds < 0:
            raise ImproperlyConfigured("YOUTUBE_UPLOADS cache durations must not be negative")
        if self.fetch_retries < 1:
            raise ImproperlyConfigured("YOUTUBE_UPLOADS['fetch_retries'] must be at least 1")

    @property
    def cache_timeout(self) -> int:
        """Cache lifetime in seconds, never below ``min_cache_seconds``."""
        return max(self.min_cache_seconds, int(self.cache_hours) * 3600)


def get_config(overrides: Optional[Dict[str, Any]] = None) -> UploadsGridConfig:
    """
    Build the grid configuration from Django settings.

    Args:
        overrides: Optional values taking precedence over ``settings.YOUTUBE_UPLOADS``

    Returns:
        UploadsGridConfig instance

    Raises:
        ImproperlyConfigured: If a key is unknown or a value is out of range
    """
    values = dict(getattr(settings, "YOUTUBE_UPLOADS", None) or {})
    if overrides:
        values.update(overrides)

    known = {f.name for f in fields(UploadsGridConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ImproperlyConfigured(f"Unknown YOUTUBE_UPLOADS setting(s): {', '.join(unknown)}")

    return UploadsGridConfig(**values)
