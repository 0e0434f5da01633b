"""
YouTube URL utilities.

Provides functions for:
- Extracting video IDs from feed item links (watch, shorts, youtu.be, embed)
- Constructing thumbnail and embed URLs
- Linking to a channel page
"""

import re
from typing import Optional
from urllib.parse import parse_qs, quote, urlparse

from ..conf import EMBED_BASE_URL, THUMBNAIL_BASE_URL

# Checked in order after the ?v= query parameter
VIDEO_ID_PATTERNS = [
    # youtube.com/shorts/{ID}
    re.compile(r"/shorts/([A-Za-z0-9_-]{6,})"),
    # youtu.be/{ID}
    re.compile(r"youtu\.be/([A-Za-z0-9_-]{6,})"),
    # youtube.com/embed/{ID}
    re.compile(r"/embed/([A-Za-z0-9_-]{6,})"),
    # youtube.com/videos/{ID}
    re.compile(r"/videos/([A-Za-z0-9_-]{6,})"),
]

EMBED_PARAMS = "autoplay=1&modestbranding=1&rel=0"


def extract_video_id(url: Optional[str], video_id_tag: Optional[str] = None) -> str:
    """
    Resolve the video ID of a feed item.

    The feed's own ``yt:videoId`` value wins when present; the link is only
    inspected without it.

    Handles:
    - youtube.com/watch?v={ID}
    - youtube.com/shorts/{ID}
    - youtu.be/{ID}
    - youtube.com/embed/{ID}
    - youtube.com/videos/{ID}

    Args:
        url: Item link in one of the formats above
        video_id_tag: Video ID provided by the feed, if any

    Returns:
        Video ID, or an empty string if none could be resolved
    """
    if video_id_tag and video_id_tag.strip():
        return video_id_tag.strip()

    if not url:
        return ""

    try:
        query = urlparse(url).query
    except ValueError:
        # Malformed netloc (e.g. an unbalanced "["), only the path patterns apply
        query = ""
    if query:
        values = parse_qs(query).get("v")
        if values and values[0]:
            return values[0]

    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return ""


def get_youtube_thumbnail_url(video_id: str, quality: str = "hqdefault") -> str:
    """
    Get YouTube thumbnail URL for a video.

    The URL is built from the video ID only; the image is not verified.

    Args:
        video_id: YouTube video ID
        quality: Thumbnail quality level (hqdefault, mqdefault, maxresdefault, ...)

    Returns:
        URL to thumbnail image
    """
    return f"{THUMBNAIL_BASE_URL}/{quote(video_id, safe='')}/{quality}.jpg"


def get_youtube_embed_url(video_id: str) -> str:
    """Get the autoplaying embed URL used by the modal player."""
    return f"{EMBED_BASE_URL}/{quote(video_id, safe='')}?{EMBED_PARAMS}"


def get_channel_page_url(identifier: str) -> str:
    """Return the YouTube channel page for a channel ID or handle."""
    if identifier:
        if identifier.startswith("UC"):
            return f"https://www.youtube.com/channel/{identifier}"
        if identifier.startswith("@"):
            return f"https://www.youtube.com/{identifier}"
    return "https://www.youtube.com"
