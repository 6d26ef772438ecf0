from watchlist.models.movie import (
    COMMON_GENRES,
    ListOptions,
    Movie,
    MovieFormData,
    SortBy,
    SortOrder,
)

__all__ = [
    "COMMON_GENRES",
    "ListOptions",
    "Movie",
    "MovieFormData",
    "SortBy",
    "SortOrder",
]
