import pytest

from youtube_uploads.utils.youtube import (
    extract_video_id,
    get_channel_page_url,
    get_youtube_embed_url,
    get_youtube_thumbnail_url,
)


class TestExtractVideoId:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("https://www.youtube.com/shorts/abcDEF123", "abcDEF123"),
            ("https://youtu.be/abcdef123456?feature=share", "abcdef123456"),
            ("https://www.youtube.com/embed/xyz_-12", "xyz_-12"),
            ("https://www.youtube.com/videos/Qwerty9", "Qwerty9"),
        ],
    )
    def test_url_shapes(self, url, expected):
        assert extract_video_id(url) == expected

    def test_shorts_ignores_extra_query_parameters(self):
        base = "https://www.youtube.com/shorts/abcDEF123"
        assert extract_video_id(base) == extract_video_id(base + "?feature=share&si=xyz")

    def test_path_tokens_need_six_characters(self):
        assert extract_video_id("https://www.youtube.com/shorts/abc12") == ""
        assert extract_video_id("https://youtu.be/abc") == ""

    def test_unresolvable_returns_empty_string(self):
        assert extract_video_id("https://www.youtube.com/channel/UC123") == ""
        assert extract_video_id("") == ""
        assert extract_video_id(None) == ""

    def test_empty_v_parameter_is_ignored(self):
        assert extract_video_id("https://www.youtube.com/shorts/abcDEF123?v=") == "abcDEF123"

    def test_feed_tag_wins_over_link(self):
        assert extract_video_id("https://www.youtube.com/watch?v=fromLink1", "fromTag99") == "fromTag99"

    def test_feed_tag_skips_link_parsing(self):
        # An unparseable link does not matter once the tag is present
        assert extract_video_id("not a url at all", " tagged123 ") == "tagged123"

    def test_blank_tag_falls_back_to_link(self):
        assert extract_video_id("https://youtu.be/abcdef123456", "  ") == "abcdef123456"

    def test_malformed_host_falls_back_to_path_patterns(self):
        assert extract_video_id("https://[broken/shorts/abcdefgh") == "abcdefgh"

    def test_malformed_host_without_path_id_is_unresolved(self):
        assert extract_video_id("https://[broken/watch?v=abcdefgh") == ""


def test_thumbnail_url():
    assert get_youtube_thumbnail_url("dQw4w9WgXcQ") == "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"


def test_thumbnail_url_quality():
    assert get_youtube_thumbnail_url("abc123", "mqdefault").endswith("/abc123/mqdefault.jpg")


def test_embed_url():
    assert (
        get_youtube_embed_url("dQw4w9WgXcQ")
        == "https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1&modestbranding=1&rel=0"
    )


def test_channel_page_url():
    assert get_channel_page_url("UC123") == "https://www.youtube.com/channel/UC123"
    assert get_channel_page_url("@handle") == "https://www.youtube.com/@handle"
    assert get_channel_page_url("") == "https://www.youtube.com"
