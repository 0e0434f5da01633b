"""Uploads grid URL configuration."""

from .default import urlpatterns as default_urlpatterns

urlpatterns = default_urlpatterns
