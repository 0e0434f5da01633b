"""
Grid rendering.

Turns a list of FeedItem into the grid markup, styles and modal player, and
provides the handler behind the template tag and the shortcode.
"""

import logging
import uuid
from typing import List, Optional

from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import gettext as _

from .conf import UploadsGridConfig, get_config
from .exceptions import FeedFetchError
from .models import ChannelSettings
from .services import get_items
from .types import FeedItem
from .utils.channel import normalize_channel_identifier

logger = logging.getLogger(__name__)

GRID_TEMPLATE = "youtube_uploads/grid.html"


def new_instance_id() -> str:
    """Unique id tying a grid to its own modal player."""
    return f"yug-{uuid.uuid4().hex[:12]}"


def render_empty() -> SafeString:
    return format_html("<p>{}</p>", _("No videos found."))


def render_error() -> SafeString:
    return format_html("<p>{}</p>", _("Could not load YouTube feed right now."))


def render_grid(
    items: List[FeedItem],
    config: Optional[UploadsGridConfig] = None,
    instance_id: Optional[str] = None,
) -> SafeString:
    """
    Render the uploads grid.

    Cards are emitted in the order given. An empty list renders the
    "No videos found." message instead of an empty grid.

    Args:
        items: Items to show
        config: Grid configuration, defaults to ``get_config()``
        instance_id: Id linking the grid to its modal, generated if omitted

    Returns:
        Safe HTML string
    """
    if not items:
        return render_empty()

    config = config or get_config()
    context = {
        "items": items,
        "column_count": config.column_count,
        "instance_id": instance_id or new_instance_id(),
    }
    return mark_safe(render_to_string(GRID_TEMPLATE, context))


def resolve_channel(channel: Optional[str] = None) -> str:
    """Use the given channel override, or the saved channel setting."""
    if channel is not None and str(channel).strip():
        return normalize_channel_identifier(channel)
    return ChannelSettings.get_channel()


def render_uploads(
    channel: Optional[str] = None,
    config: Optional[UploadsGridConfig] = None,
    instance_id: Optional[str] = None,
) -> SafeString:
    """
    Render the latest uploads of a channel.

    Feed failures are logged and rendered as a short message; they never
    propagate to the calling template.

    Args:
        channel: Channel ID or handle overriding the saved setting
        config: Grid configuration, defaults to ``get_config()``
        instance_id: Id linking the grid to its modal, generated if omitted

    Returns:
        Safe HTML string
    """
    config = config or get_config()
    identifier = resolve_channel(channel)

    try:
        items = get_items(identifier, config)
    except FeedFetchError as e:
        logger.warning(f"Could not load uploads for channel {identifier!r}: {e}")
        return render_error()

    return render_grid(items, config, instance_id)
