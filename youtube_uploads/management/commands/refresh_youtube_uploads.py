"""Django command to fetch a channel's uploads and warm the grid cache."""

from django.core.management.base import BaseCommand, CommandError

from youtube_uploads.conf import get_config
from youtube_uploads.exceptions import FeedFetchError
from youtube_uploads.rendering import resolve_channel
from youtube_uploads.services import get_items, invalidate_items
from youtube_uploads.utils.channel import build_feed_url


class Command(BaseCommand):
    help = "Fetch the latest uploads for the saved (or given) channel and cache them"

    def add_arguments(self, parser):
        parser.add_argument(
            "--channel", type=str, help="Channel ID or handle (defaults to the saved setting)"
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Drop the cached list first so the feed is fetched again",
        )

    def handle(self, *args, **options):
        config = get_config()
        identifier = resolve_channel(options.get("channel"))
        feed_url = build_feed_url(identifier, config.default_channel)

        self.stdout.write(self.style.SUCCESS(f"Channel: {identifier}"))
        self.stdout.write(f"Feed URL: {feed_url}")

        if options.get("force"):
            invalidate_items(identifier, config)

        try:
            items = get_items(identifier, config)
        except FeedFetchError as e:
            raise CommandError(f"Error: {str(e)}") from e

        if not items:
            self.stdout.write(self.style.WARNING("No videos found."))
            return

        for item in items:
            self.stdout.write(f"✓ {item.video_id} - {item.title}")

        self.stdout.write(
            self.style.SUCCESS(f"{len(items)} videos cached for {config.cache_timeout} seconds")
        )
