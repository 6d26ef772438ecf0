"""
Shared fixtures: sample movies and in-memory fakes of the external services.
"""

import pytest

from watchlist.core.errors import PersistenceError, UploadError
from watchlist.models.movie import Movie, MovieFormData


def make_movie(id: int, title: str, genre=None, rating=None, poster_url=None) -> Movie:
    return Movie(
        id=id,
        title=title,
        genre=genre,
        rating=rating,
        poster_url=poster_url,
        created_at="2024-01-01T00:00:00Z",
    )


class FakeMovieService:
    """In-memory stand-in for MovieServiceClient that records every call."""

    def __init__(self, movies=None, genres=None):
        self.movies = {m.id: m for m in (movies or [])}
        self.genres = list(genres or [])
        self.calls = []
        self.fail_on = set()
        self.next_id = max(self.movies, default=0) + 1

    def _check(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise PersistenceError(f"{name} failed", status_code=500)

    def list_movies(self, **params):
        self._check("list_movies")
        return list(self.movies.values())

    def get_genres(self):
        self._check("get_genres")
        return list(self.genres)

    def get_movie(self, movie_id):
        self._check("get_movie")
        if movie_id not in self.movies:
            raise PersistenceError("not found", status_code=404)
        return self.movies[movie_id]

    def create_movie(self, form: MovieFormData):
        self._check("create_movie")
        movie = Movie(id=self.next_id, created_at="2024-02-01T00:00:00Z", **form.model_dump())
        self.movies[movie.id] = movie
        self.next_id += 1
        return movie

    def update_movie(self, movie_id, form: MovieFormData):
        self._check("update_movie")
        old = self.movies[movie_id]
        self.movies[movie_id] = Movie(
            id=movie_id,
            created_at=old.created_at,
            updated_at="2024-03-01T00:00:00Z",
            **form.model_dump(),
        )

    def delete_movie(self, movie_id):
        self._check("delete_movie")
        del self.movies[movie_id]


class FakeUploader:
    """Uploader returning a fixed URL, or failing when ``fail`` is set."""

    def __init__(self, url="https://img.example.com/poster.jpg", fail=False):
        self.url = url
        self.fail = fail
        self.uploaded = []

    def upload(self, image):
        self.uploaded.append(image)
        if self.fail:
            raise UploadError("upload failed")
        return self.url


@pytest.fixture
def dune():
    return make_movie(1, "Dune", genre="Sci-Fi", rating=5)


@pytest.fixture
def clue():
    return make_movie(2, "Clue", genre="Comedy", rating=3)


@pytest.fixture
def movie_service(dune, clue):
    return FakeMovieService(movies=[dune, clue], genres=["Comedy", "Sci-Fi"])


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def movie_factory():
    return make_movie


@pytest.fixture
def failing_uploader():
    return FakeUploader(fail=True)


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging() in a test."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
