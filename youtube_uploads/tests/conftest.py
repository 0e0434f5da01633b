"""Pytest fixtures for uploads grid tests."""

from django.core.cache import cache

import pytest

from youtube_uploads.conf import UploadsGridConfig
from youtube_uploads.types import FeedEntry, FeedItem
from youtube_uploads.utils.youtube import get_youtube_thumbnail_url

CHANNEL_ID = "UC_x5XG1OV2P6uZZ5FSM9Ttw"


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def grid_config():
    return UploadsGridConfig()


def make_entry(index: int, with_tag: bool = True) -> FeedEntry:
    video_id = f"video{index:06d}"
    tags = {"yt_videoid": video_id, "yt_channelid": CHANNEL_ID} if with_tag else {}
    return FeedEntry(
        title=f"Video {index}",
        link=f"https://www.youtube.com/watch?v={video_id}",
        tags=tags,
    )


def make_item(index: int, title: str = "") -> FeedItem:
    video_id = f"video{index:06d}"
    return FeedItem(
        video_id=video_id,
        title=title or f"Video {index}",
        link=f"https://www.youtube.com/watch?v={video_id}",
        thumbnail_url=get_youtube_thumbnail_url(video_id),
    )


@pytest.fixture
def feed_entries():
    return [make_entry(i) for i in range(15)]


@pytest.fixture
def feed_items():
    return [make_item(i) for i in range(3)]


@pytest.fixture
def mock_atom_xml():
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015"
      xmlns:media="http://search.yahoo.com/mrss/"
      xmlns="http://www.w3.org/2005/Atom">
    <link rel="self" href="https://www.youtube.com/feeds/videos.xml?channel_id=UC_x5XG1OV2P6uZZ5FSM9Ttw"/>
    <id>yt:channel:_x5XG1OV2P6uZZ5FSM9Ttw</id>
    <yt:channelId>_x5XG1OV2P6uZZ5FSM9Ttw</yt:channelId>
    <title>Test Channel</title>
    <published>2015-01-01T00:00:00+00:00</published>
    <entry>
        <id>yt:video:dQw4w9WgXcQ</id>
        <yt:videoId>dQw4w9WgXcQ</yt:videoId>
        <yt:channelId>UC_x5XG1OV2P6uZZ5FSM9Ttw</yt:channelId>
        <title>Regular upload</title>
        <link rel="alternate" href="https://www.youtube.com/watch?v=dQw4w9WgXcQ"/>
        <published>2024-01-02T12:00:00+00:00</published>
    </entry>
    <entry>
        <id>yt:video:shortAbc123</id>
        <yt:videoId>shortAbc123</yt:videoId>
        <yt:channelId>UC_x5XG1OV2P6uZZ5FSM9Ttw</yt:channelId>
        <title>A Short &amp; sweet</title>
        <link rel="alternate" href="https://www.youtube.com/shorts/shortAbc123"/>
        <published>2024-01-01T12:00:00+00:00</published>
    </entry>
</feed>"""


@pytest.fixture
def mock_empty_atom_xml():
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns="http://www.w3.org/2005/Atom">
    <id>yt:channel:_x5XG1OV2P6uZZ5FSM9Ttw</id>
    <title>Empty Channel</title>
</feed>"""
