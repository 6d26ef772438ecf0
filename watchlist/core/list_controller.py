"""
List screen controller.

Owns the in-memory movie set, the genre list, the search/filter/sort
parameters and the delete confirmation state. The visible list is derived
from these on every access.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from watchlist.core.errors import PersistenceError
from watchlist.core.pipeline import derive
from watchlist.models.movie import ListOptions, Movie, SortBy, SortOrder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No delete pending."""


@dataclass(frozen=True)
class ConfirmingDelete:
    """Delete dialog open for ``movie``."""

    movie: Movie


DeleteState = Union[Idle, ConfirmingDelete]


class MovieListController:
    """
    State behind the list screen.

    Usage:
        controller = MovieListController(client)
        controller.load()
        controller.set_search("mat")
        for movie in controller.visible:
            ...
    """

    def __init__(self, movie_service):
        self.movie_service = movie_service
        self.movies: List[Movie] = []
        self.genres: List[str] = []
        self.options = ListOptions()
        self.loading = False
        self.loaded = False
        self.delete_state: DeleteState = Idle()

    @property
    def visible(self) -> List[Movie]:
        return derive(self.movies, self.options)

    @property
    def has_active_filters(self) -> bool:
        return bool(self.options.search or self.options.genre)

    @property
    def empty_message(self) -> str:
        if self.has_active_filters:
            return "No movies found matching your filters"
        return "No movies in your watchlist yet"

    def set_options(self, **changes) -> None:
        self.options = ListOptions(**{**self.options.model_dump(), **changes})

    def set_search(self, search: str) -> None:
        self.set_options(search=search or "")

    def set_genre(self, genre: str) -> None:
        self.set_options(genre=genre or "")

    def set_sort(self, sort_by: Union[SortBy, str], sort_order: Union[SortOrder, str]) -> None:
        self.set_options(sort_by=SortBy(sort_by), sort_order=SortOrder(sort_order))

    def load(self) -> None:
        """
        Fetch movies and genres, replacing the current state.

        Both fetches are attempted. A failed fetch leaves its piece of state
        as it was.

        Raises:
            PersistenceError: First failure, after both fetches were tried
        """
        self.loading = True
        errors: List[PersistenceError] = []
        try:
            try:
                self.movies = self.movie_service.list_movies()
            except PersistenceError as e:
                logger.error(f"Failed to load movies: {e}")
                errors.append(e)
            try:
                self.genres = self.movie_service.get_genres()
            except PersistenceError as e:
                logger.error(f"Failed to load genres: {e}")
                errors.append(e)
        finally:
            self.loading = False
            self.loaded = True
        if errors:
            raise errors[0]
        logger.info(f"Loaded {len(self.movies)} movies, {len(self.genres)} genres")

    def find(self, movie_id: int) -> Optional[Movie]:
        return next((m for m in self.movies if m.id == movie_id), None)

    def request_delete(self, movie_id: int) -> ConfirmingDelete:
        """
        Open the delete confirmation for a movie.

        Raises:
            KeyError: No movie with that id in the current set
        """
        movie = self.find(movie_id)
        if movie is None:
            raise KeyError(movie_id)
        self.delete_state = ConfirmingDelete(movie)
        return self.delete_state

    def cancel_delete(self) -> None:
        self.delete_state = Idle()

    def confirm_delete(self) -> Optional[Movie]:
        """
        Delete the movie awaiting confirmation.

        Returns:
            The removed movie, or None if nothing was pending

        Raises:
            PersistenceError: Delete failed; the set is left unchanged
        """
        state = self.delete_state
        if not isinstance(state, ConfirmingDelete):
            return None
        self.delete_state = Idle()

        movie = state.movie
        try:
            self.movie_service.delete_movie(movie.id)
        except PersistenceError as e:
            logger.error(f"Failed to delete movie {movie.id}: {e}")
            raise
        self.movies = [m for m in self.movies if m.id != movie.id]
        logger.info(f"Deleted movie {movie.id} ({movie.title!r})")
        return movie
