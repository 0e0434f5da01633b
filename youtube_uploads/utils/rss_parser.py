"""Channel feed fetching and parsing utilities."""

import logging
import time
from typing import List
from urllib.parse import urlparse

import feedparser
import requests

from ..conf import USER_AGENT
from ..exceptions import FeedFetchError
from ..types import FeedEntry

logger = logging.getLogger(__name__)

# feedparser exposes yt:videoId, yt:channelId as yt_videoid, yt_channelid
YOUTUBE_TAG_PREFIX = "yt_"


def fetch_feed_document(url: str, timeout: int = 10, retries: int = 1) -> bytes:
    """
    Fetch a feed document with retry logic.

    Redirects are followed (handle-based feed URLs redirect). Client errors
    (4xx) are not retried.

    Args:
        url: Feed URL to fetch
        timeout: Request timeout in seconds
        retries: Number of attempts

    Returns:
        Raw response body

    Raises:
        FeedFetchError: If the URL is invalid or the fetch fails after retries
    """
    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        raise FeedFetchError("Invalid feed URL", url=url)

    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/atom+xml,application/rss+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    last_exception = None

    for attempt in range(retries):
        try:
            response = requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)
            response.raise_for_status()
            return response.content

        except requests.RequestException as e:
            last_exception = e
            status_code = getattr(e.response, "status_code", None)
            if status_code is not None and 400 <= status_code < 500:
                break
            if attempt < retries - 1:
                wait_time = 2**attempt  # Exponential backoff
                logger.debug(f"Feed fetch attempt {attempt + 1} failed for {url}: {e}")
                time.sleep(wait_time)

    raise FeedFetchError(
        f"Feed request failed: {last_exception}", url=url, original_error=last_exception
    )


def parse_feed_entries(document: bytes, url: str = "") -> List[FeedEntry]:
    """
    Parse an Atom/RSS document into feed entries, in document order.

    A well-formed feed without entries yields an empty list.

    Args:
        document: Raw feed document
        url: Feed URL, for error reporting

    Returns:
        List of FeedEntry

    Raises:
        FeedFetchError: If the document is not a parseable feed
    """
    feed = feedparser.parse(document)

    if not feed.entries:
        if getattr(feed, "bozo", False):
            error = getattr(feed, "bozo_exception", None)
            raise FeedFetchError(f"Feed parsing error: {error}", url=url, original_error=error)
        if not feed.get("version"):
            raise FeedFetchError("Response is not an RSS or Atom feed", url=url)

    entries = []
    for entry in feed.entries:
        tags = {
            key: value.strip()
            for key, value in entry.items()
            if key.startswith(YOUTUBE_TAG_PREFIX) and isinstance(value, str)
        }
        entries.append(
            FeedEntry(
                title=entry.get("title", ""),
                link=entry.get("link", ""),
                tags=tags,
            )
        )

    return entries


def fetch_and_parse_feed(url: str, timeout: int = 10, retries: int = 1) -> List[FeedEntry]:
    """
    Fetch and parse a channel feed.

    Args:
        url: Feed URL
        timeout: Request timeout in seconds
        retries: Number of fetch attempts

    Returns:
        List of FeedEntry in feed order

    Raises:
        FeedFetchError: On network, HTTP or parse failure
    """
    logger.info(f"Fetching channel feed: {url}")
    document = fetch_feed_document(url, timeout=timeout, retries=retries)
    return parse_feed_entries(document, url=url)
