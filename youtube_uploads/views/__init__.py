"""Uploads grid views."""

from .default import uploads_grid_view, uploads_page_view

__all__ = [
    "uploads_grid_view",
    "uploads_page_view",
]
