"""
Channel identifier utilities.

Provides functions for:
- Recognising channel handles (@name) and canonical channel IDs (UC...)
- Normalizing user input for the channel setting
- Building the public uploads feed URL for a channel
"""

import re
from typing import Optional
from urllib.parse import quote

from bs4 import BeautifulSoup

from ..conf import DEFAULT_CHANNEL_ID, FEED_BASE_URL

HANDLE_RE = re.compile(r"^@[A-Za-z0-9_.-]{2,}$")
CHANNEL_ID_RE = re.compile(r"^UC[0-9A-Za-z_-]{20,}$")


def is_channel_handle(value: str) -> bool:
    """Check if a value is a channel handle like ``@SomeHandle``."""
    return bool(value) and HANDLE_RE.match(value) is not None


def is_channel_id(value: str) -> bool:
    """Check if a value is a canonical channel ID (``UC`` + 20 or more characters)."""
    return bool(value) and CHANNEL_ID_RE.match(value) is not None


def _sanitize_text(value: str) -> str:
    """Strip tags and collapse whitespace, keeping only the visible text."""
    text = BeautifulSoup(value, "html.parser").get_text()
    return " ".join(text.split())


def normalize_channel_identifier(raw: Optional[str]) -> str:
    """
    Normalize a user-supplied channel identifier.

    Handles and canonical channel IDs are returned as-is (trimmed). Anything
    else is not rejected: it falls back to a sanitized version of the input
    with tags stripped and whitespace collapsed.

    Args:
        raw: Channel ID, handle, or arbitrary user input

    Returns:
        Normalized identifier string (may be empty)
    """
    value = str(raw or "").strip()

    if is_channel_handle(value) or is_channel_id(value):
        return value

    return _sanitize_text(value)


def build_feed_url(identifier: Optional[str], default_channel: str = DEFAULT_CHANNEL_ID) -> str:
    """
    Build the uploads feed URL for a channel ID or handle.

    Handles use the ``channel=`` query variant which YouTube redirects to the
    channel's feed; everything else is treated as a channel ID.

    Args:
        identifier: Channel ID or handle; empty means ``default_channel``
        default_channel: Channel used when no identifier is given

    Returns:
        Feed URL
    """
    value = str(identifier or "").strip()
    if not value:
        value = default_channel

    # safe="" mirrors rawurlencode: "@" becomes "%40"
    if value.startswith("@"):
        return f"{FEED_BASE_URL}?channel={quote(value, safe='')}"

    return f"{FEED_BASE_URL}?channel_id={quote(value, safe='')}"
