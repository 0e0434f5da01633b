"""
Services package.
"""

from .uploads_service import build_items, get_feed_cache_key, get_items, invalidate_items

__all__ = ["build_items", "get_feed_cache_key", "get_items", "invalidate_items"]
