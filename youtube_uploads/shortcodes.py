"""
Shortcode expansion for page content.

Replaces ``[youtube_uploads]`` and ``[youtube_uploads channel=...]`` inside
content with the rendered uploads grid. Attribute values may be bare or
quoted; unknown attributes are ignored.
"""

import re
from typing import Dict

from django.utils.html import conditional_escape
from django.utils.safestring import SafeData, SafeString, mark_safe

from .rendering import render_uploads

SHORTCODE_TAG = "youtube_uploads"

SHORTCODE_RE = re.compile(r"\[" + SHORTCODE_TAG + r"(?P<attrs>(?:\s[^\]]*)?)\]")
ATTR_RE = re.compile(r"""(\w+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"']+))""")

SUPPORTED_ATTRS = {"channel"}


def parse_shortcode_attrs(text: str) -> Dict[str, str]:
    """
    Parse shortcode attributes.

    Args:
        text: Attribute part of a shortcode, e.g. ``channel="@handle"``

    Returns:
        Dict of supported attribute names to values
    """
    attrs = {}
    for match in ATTR_RE.finditer(text or ""):
        name = match.group(1).lower()
        if name not in SUPPORTED_ATTRS:
            continue
        value = next((g for g in match.groups()[1:] if g is not None), "")
        attrs[name] = value
    return attrs


def expand_shortcodes(content: str, autoescape: bool = True) -> SafeString:
    """
    Expand uploads grid shortcodes in content.

    Args:
        content: Page content possibly containing shortcodes
        autoescape: Escape the text around shortcodes

    Returns:
        Safe HTML string
    """
    if content is None:
        content = ""
    # Content already marked safe is trusted as-is
    if autoescape and not isinstance(content, SafeData):
        escape = conditional_escape
    else:
        escape = str
    content = str(content)

    parts = []
    position = 0
    for match in SHORTCODE_RE.finditer(content):
        parts.append(escape(content[position : match.start()]))
        attrs = parse_shortcode_attrs(match.group("attrs"))
        parts.append(render_uploads(channel=attrs.get("channel")))
        position = match.end()
    parts.append(escape(content[position:]))

    return mark_safe("".join(str(part) for part in parts))
