"""
Core client logic: derived list pipeline, controllers and errors.
"""

from watchlist.core.errors import (
    WatchlistError,
    ValidationError,
    UploadError,
    PersistenceError,
    NetworkError,
)
from watchlist.core.pipeline import derive, title_sort_key
from watchlist.core.form_controller import MovieFormController, MovieFormInput, FormStatus
from watchlist.core.list_controller import MovieListController, Idle, ConfirmingDelete

__all__ = [
    'WatchlistError',
    'ValidationError',
    'UploadError',
    'PersistenceError',
    'NetworkError',
    'derive',
    'title_sort_key',
    'MovieFormController',
    'MovieFormInput',
    'FormStatus',
    'MovieListController',
    'Idle',
    'ConfirmingDelete',
]
