"""Uploads grid type definitions."""

from dataclasses import dataclass, field
from typing import Dict

from .utils.youtube import get_youtube_embed_url


@dataclass(frozen=True)
class FeedEntry:
    """One entry of a parsed channel feed, before video ID resolution."""

    title: str
    link: str
    # Namespaced yt:* values, e.g. yt_videoid; compared but not hashed
    tags: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def video_id_tag(self) -> str:
        return self.tags.get("yt_videoid", "")


@dataclass(frozen=True)
class FeedItem:
    """A video shown as one card in the grid."""

    video_id: str
    title: str
    link: str
    thumbnail_url: str

    @property
    def embed_url(self) -> str:
        return get_youtube_embed_url(self.video_id)
