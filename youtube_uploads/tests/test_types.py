from youtube_uploads.types import FeedEntry


class TestFeedEntry:
    def test_hashable(self):
        entry = FeedEntry(title="A", link="https://youtu.be/abcdef1", tags={"yt_videoid": "abcdef1"})

        assert hash(entry) == hash(
            FeedEntry(title="A", link="https://youtu.be/abcdef1", tags={"yt_videoid": "abcdef1"})
        )
        assert len({entry, entry}) == 1

    def test_tags_take_part_in_equality(self):
        tagged = FeedEntry(title="A", link="", tags={"yt_videoid": "abcdef1"})

        assert tagged != FeedEntry(title="A", link="")
        assert tagged.video_id_tag == "abcdef1"
        assert FeedEntry(title="A", link="").video_id_tag == ""
