from django import forms

from .models import ChannelSettings
from .utils.channel import normalize_channel_identifier


class ChannelSettingsForm(forms.ModelForm):
    """Options form for the uploads grid channel."""

    class Meta:
        model = ChannelSettings
        fields = ["channel_id"]
        widgets = {
            "channel_id": forms.TextInput(
                attrs={
                    "class": "vTextField",
                    "placeholder": "UCxxxxxxxxxxxxxxxxxxxxxx or @channelhandle",
                }
            ),
        }

    def clean_channel_id(self):
        """Keep handles and channel IDs as-is, sanitize anything else."""
        return normalize_channel_identifier(self.cleaned_data.get("channel_id"))
