"""Template tags for embedding the uploads grid."""

from django import template

from ..rendering import render_uploads
from ..shortcodes import expand_shortcodes

register = template.Library()


@register.simple_tag(name="youtube_uploads")
def youtube_uploads_tag(channel=None):
    """
    Render the latest uploads grid.

    Usage::

        {% load youtube_uploads %}
        {% youtube_uploads %}
        {% youtube_uploads channel="@SomeHandle" %}
    """
    return render_uploads(channel=channel)


@register.filter(name="youtube_uploads_shortcodes", needs_autoescape=True)
def youtube_uploads_shortcodes(value, autoescape=True):
    """Expand ``[youtube_uploads ...]`` shortcodes in page content."""
    return expand_shortcodes(value, autoescape=autoescape)
