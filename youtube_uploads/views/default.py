"""Default views serving the uploads grid."""

import re

from django.http import HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from ..rendering import render_uploads, resolve_channel
from ..utils.channel import normalize_channel_identifier

SHORTCODE_UNSAFE_RE = re.compile(r"[\"'\[\]]")


@require_http_methods(["GET"])
def uploads_grid_view(request):
    """
    Serve the uploads grid as an HTML fragment.

    Query Parameters:
        channel (optional): Channel ID or handle overriding the saved setting

    Returns:
        HttpResponse: Grid markup, or the "no videos" / "could not load" message
    """
    channel = request.GET.get("channel", "").strip() or None
    return HttpResponse(render_uploads(channel=channel), content_type="text/html")


@require_http_methods(["GET"])
def uploads_page_view(request):
    """
    Serve a full page embedding the uploads grid through the shortcode.

    Query Parameters:
        channel (optional): Channel ID or handle overriding the saved setting
    """
    # Quotes and brackets would end the shortcode attribute early
    channel = normalize_channel_identifier(request.GET.get("channel", ""))
    channel = SHORTCODE_UNSAFE_RE.sub("", channel).strip()
    if channel:
        content = f'[youtube_uploads channel="{channel}"]'
    else:
        content = "[youtube_uploads]"

    context = {"content": content, "channel": resolve_channel(channel or None)}
    return render(request, "youtube_uploads/page.html", context)
