"""
URL configuration for the uploads grid app.
"""

from django.urls import path

from youtube_uploads import views

urlpatterns = [
    path("youtube-uploads/", views.uploads_grid_view, name="youtube_uploads_grid"),
    path("", views.uploads_page_view, name="youtube_uploads_page"),
]
