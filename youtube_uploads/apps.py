from django.apps import AppConfig


class YoutubeUploadsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "youtube_uploads"
    verbose_name = "YouTube Uploads Grid"
