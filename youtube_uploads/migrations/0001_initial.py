from django.db import migrations, models

import youtube_uploads.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ChannelSettings",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "channel_id",
                    models.CharField(
                        blank=True,
                        default=youtube_uploads.models.default_channel_id,
                        help_text="YouTube channel ID that starts with UC, or channel handle that starts with @.",
                        max_length=255,
                        verbose_name="YouTube Channel ID or Handle",
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "YouTube Uploads Grid",
                "verbose_name_plural": "YouTube Uploads Grid",
            },
        ),
    ]
