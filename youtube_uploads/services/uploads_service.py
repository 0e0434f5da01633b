"""Uploads service.

Fetches a channel's uploads feed, resolves video IDs and caches the
resulting item list. Cache entries are keyed by feed URL, item count and
format version.
"""

import hashlib
import logging
from typing import Callable, List, Optional

from django.core.cache import cache

from ..conf import UploadsGridConfig, get_config
from ..types import FeedEntry, FeedItem
from ..utils.channel import build_feed_url
from ..utils.rss_parser import fetch_and_parse_feed
from ..utils.youtube import extract_video_id, get_youtube_thumbnail_url

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "youtube_uploads:feed"

FeedFetcher = Callable[..., List[FeedEntry]]


def get_feed_cache_key(feed_url: str, count: int, version: str) -> str:
    """Build the cache key for a (feed URL, item count, version) triple."""
    digest = hashlib.md5(f"{feed_url}_{count}_{version}".encode("utf-8")).hexdigest()
    return f"{CACHE_KEY_PREFIX}:{digest}"


def build_items(entries: List[FeedEntry], count: int) -> List[FeedItem]:
    """
    Turn feed entries into grid items.

    Only the first ``count`` entries are considered, in feed order. Entries
    whose video ID cannot be resolved are dropped.

    Args:
        entries: Parsed feed entries
        count: Maximum number of entries to use

    Returns:
        List of FeedItem
    """
    items = []
    for entry in entries[:count]:
        video_id = extract_video_id(entry.link, entry.video_id_tag)
        if not video_id:
            logger.debug(f"Skipping feed entry without video ID: {entry.link!r}")
            continue

        items.append(
            FeedItem(
                video_id=video_id,
                title=entry.title,
                link=entry.link,
                thumbnail_url=get_youtube_thumbnail_url(video_id),
            )
        )

    return items


def get_items(
    identifier: Optional[str],
    config: Optional[UploadsGridConfig] = None,
    fetcher: Optional[FeedFetcher] = None,
) -> List[FeedItem]:
    """
    Get the latest uploads of a channel, served from cache when fresh.

    An empty list is a valid result and is cached like any other; fetch
    failures are not cached.

    Args:
        identifier: Channel ID or handle (empty means the configured default)
        config: Grid configuration, defaults to ``get_config()``
        fetcher: Feed retrieval function, defaults to ``fetch_and_parse_feed``

    Returns:
        List of FeedItem, at most ``config.item_count`` long

    Raises:
        FeedFetchError: If the feed cannot be retrieved or parsed
    """
    config = config or get_config()
    feed_url = build_feed_url(identifier, config.default_channel)
    cache_key = get_feed_cache_key(feed_url, config.item_count, config.cache_version)

    cached = cache.get(cache_key)
    if cached is not None:
        logger.debug(f"Uploads cache hit for {feed_url}")
        return cached

    logger.debug(f"Uploads cache miss for {feed_url}")
    fetcher = fetcher or fetch_and_parse_feed
    entries = fetcher(feed_url, timeout=config.fetch_timeout, retries=config.fetch_retries)

    items = build_items(entries, config.item_count)
    cache.set(cache_key, items, timeout=config.cache_timeout)

    logger.info(
        f"Cached {len(items)} uploads from {feed_url} for {config.cache_timeout} seconds"
    )
    return items


def invalidate_items(identifier: Optional[str], config: Optional[UploadsGridConfig] = None) -> str:
    """
    Drop the cached item list for a channel.

    Returns:
        The cache key that was cleared
    """
    config = config or get_config()
    feed_url = build_feed_url(identifier, config.default_channel)
    cache_key = get_feed_cache_key(feed_url, config.item_count, config.cache_version)
    cache.delete(cache_key)
    return cache_key
