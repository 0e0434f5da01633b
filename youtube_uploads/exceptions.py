"""
Uploads grid exceptions.

An empty feed is not an error: it resolves to an empty item list which is
cached and rendered as "No videos found."
"""

from typing import Optional


class UploadsGridError(Exception):
    """Base exception for all uploads grid errors."""

    pass


class FeedFetchError(UploadsGridError):
    """
    Exception raised when the channel feed cannot be retrieved or parsed.

    Failures are never cached; the next uncached request tries again.

    Attributes:
        message: Error description
        url: Feed URL that was requested
        original_error: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error

    def __str__(self):
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message
