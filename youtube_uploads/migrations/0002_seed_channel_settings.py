# Generated manually

from django.db import migrations


def seed_channel_settings(apps, schema_editor):
    """Store the default channel on first install if no value exists yet."""
    from youtube_uploads.conf import get_config

    ChannelSettings = apps.get_model("youtube_uploads", "ChannelSettings")
    obj, created = ChannelSettings.objects.get_or_create(
        pk=1, defaults={"channel_id": get_config().default_channel}
    )
    if not created and not obj.channel_id:
        obj.channel_id = get_config().default_channel
        obj.save(update_fields=["channel_id"])


class Migration(migrations.Migration):

    dependencies = [
        ("youtube_uploads", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_channel_settings, migrations.RunPython.noop),
    ]
