"""Admin configuration for the application."""

import logging

from django.contrib import admin
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.html import format_html

from .forms import ChannelSettingsForm
from .models import ChannelSettings
from .services import invalidate_items
from .utils.youtube import get_channel_page_url

logger = logging.getLogger(__name__)

# Customize Admin Site
admin.site.site_header = "TubeGrid"
admin.site.site_title = "TubeGrid Admin"
admin.site.index_title = "Welcome to TubeGrid"


@admin.register(ChannelSettings)
class ChannelSettingsAdmin(admin.ModelAdmin):
    """Options page for the uploads grid (a single settings row)."""

    form = ChannelSettingsForm
    readonly_fields = ["example_feed_url", "channel_page", "shortcode_usage", "updated_at"]

    fieldsets = (
        (None, {"fields": ("channel_id", "example_feed_url", "channel_page")}),
        ("Shortcode", {"fields": ("shortcode_usage",)}),
        ("Timestamps", {"fields": ("updated_at",), "classes": ("collapse",)}),
    )

    def has_add_permission(self, request):
        return not ChannelSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        """Go straight to the settings form."""
        obj = ChannelSettings.load()
        return redirect(
            reverse(
                f"admin:{obj._meta.app_label}_{obj._meta.model_name}_change", args=[obj.pk]
            )
        )

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        # Drop any cached list for the saved channel so the next render is fresh
        cache_key = invalidate_items(obj.channel_id)
        logger.info(f"Channel setting saved as {obj.channel_id!r}, cleared {cache_key}")

    @admin.display(description="Example feed URL that will be used")
    def example_feed_url(self, instance):
        return format_html("<code>{}</code>", instance.feed_url)

    @admin.display(description="Channel page")
    def channel_page(self, instance):
        url = get_channel_page_url(instance.channel_id)
        return format_html('<a href="{}" target="_blank" rel="noopener">{}</a>', url, url)

    @admin.display(description="Usage")
    def shortcode_usage(self, instance):
        return format_html(
            "<code>[youtube_uploads]</code> or <code>{}</code><br>"
            "The shortcode reads the saved channel. Caching uses the channel value, "
            "so switching channels will show fresh results.",
            '[youtube_uploads channel="@handle"]',
        )
