"""Database models for the application."""

from django.db import models

from .conf import get_config
from .utils.channel import build_feed_url


def default_channel_id() -> str:
    return get_config().default_channel


class ChannelSettings(models.Model):
    """Site-wide settings for the uploads grid (a single row)."""

    SINGLETON_PK = 1

    channel_id = models.CharField(
        max_length=255,
        blank=True,
        default=default_channel_id,
        help_text="YouTube channel ID that starts with UC, or channel handle that starts with @.",
        verbose_name="YouTube Channel ID or Handle",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "YouTube Uploads Grid"
        verbose_name_plural = "YouTube Uploads Grid"

    def __str__(self):
        return self.channel_id or "YouTube Uploads Grid"

    def save(self, *args, **kwargs):
        """Always store the single settings row."""
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "ChannelSettings":
        """Return the settings row, seeding it with the default channel if missing."""
        obj, _ = cls.objects.get_or_create(
            pk=cls.SINGLETON_PK, defaults={"channel_id": default_channel_id()}
        )
        return obj

    @classmethod
    def get_channel(cls) -> str:
        """Return the saved channel, or the configured default when empty."""
        return cls.load().channel_id or default_channel_id()

    @property
    def feed_url(self) -> str:
        """Feed URL the saved value resolves to."""
        return build_feed_url(self.channel_id, get_config().default_channel)
