"""
Derived list pipeline for the list screen.

Turns the full in-memory movie set plus the current search, genre and sort
parameters into the ordered subset to render. Recomputed from scratch on
every change; the sets involved are tens to low hundreds of records.
"""

import unicodedata
from typing import Any, Callable, List, Optional, Sequence

from watchlist.models.movie import ListOptions, Movie, SortBy, SortOrder


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def title_sort_key(title: str) -> tuple:
    """
    Collation key approximating locale-aware string ordering.

    Compares base letters first (ignoring accents and case), then accents,
    then case with lowercase ahead of uppercase.

    Args:
        title: Movie title

    Returns:
        Tuple usable as a sort key
    """
    folded = title.casefold()
    return (_strip_accents(folded), folded, title.swapcase())


def _rating_key(movie: Movie) -> int:
    return movie.rating or 0


def _title_key(movie: Movie) -> tuple:
    return title_sort_key(movie.title)


_SORT_KEYS: dict[SortBy, Callable[[Movie], Any]] = {
    SortBy.TITLE: _title_key,
    SortBy.RATING: _rating_key,
}


def derive(
    movies: Sequence[Movie],
    options: Optional[ListOptions] = None,
    **overrides: Any,
) -> List[Movie]:
    """
    Compute the visible movie list.

    Filters by search term, then by genre, then sorts. Pure: the input
    sequence is not modified and identical inputs give identical output.

    Args:
        movies: Full movie set
        options: Search/filter/sort parameters (defaults: no filter, title asc)
        **overrides: Individual ListOptions fields overriding ``options``

    Returns:
        New list with the filtered, ordered movies
    """
    if options is None:
        options = ListOptions(**overrides)
    elif overrides:
        options = ListOptions(**{**options.model_dump(), **overrides})

    result = list(movies)

    if options.search:
        needle = options.search.casefold()
        result = [m for m in result if needle in m.title.casefold()]

    if options.genre:
        result = [m for m in result if m.genre == options.genre]

    # sorted() is stable with reverse=True too, so ties keep input order
    return sorted(
        result,
        key=_SORT_KEYS[options.sort_by],
        reverse=options.sort_order == SortOrder.DESC,
    )
