"""
Error taxonomy for the watchlist client.

Every flow boundary (form submission, delete confirmation, list load)
catches WatchlistError and shows it to the user. Nothing is retried.
"""

from typing import Optional


class WatchlistError(Exception):
    """Base class for all client-side failures shown to the user."""


class ValidationError(WatchlistError):
    """Form input rejected before any network call was made."""


class UploadError(WatchlistError):
    """The image upload service failed or returned no URL."""


class PersistenceError(WatchlistError):
    """A create/update/delete/list/genre call to the movie service failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(PersistenceError):
    """Transport-level failure (connection refused, timeout) talking to the movie service."""
