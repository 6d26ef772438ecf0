"""
HTTP client for the remote movie service.

All endpoints live under ``{base_url}/api``. The client is a plain value
built from configuration and passed to the controllers that need it.
"""

import logging
from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from watchlist.core.errors import NetworkError, PersistenceError
from watchlist.models.movie import Movie, MovieFormData

logger = logging.getLogger(__name__)

_MOVIE_LIST = TypeAdapter(List[Movie])
_GENRE_LIST = TypeAdapter(List[str])


class MovieServiceClient:
    """
    Client for the movie CRUD and genre endpoints.

    Transport failures raise NetworkError; error statuses and malformed
    bodies raise PersistenceError.

    Usage:
        client = MovieServiceClient("https://movies.example.com")
        movies = client.list_movies()
        created = client.create_movie(MovieFormData(title="Dune"))
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        """
        Args:
            base_url: Service root, without the ``/api`` suffix
            session: requests session to use (a new one if omitted)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    def _request(self, method: str, path: str, action: str, **kwargs: Any) -> requests.Response:
        url = self._url(path)
        logger.debug(f"{method} {url}")
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise PersistenceError(f"Failed to {action}: HTTP {status}", status_code=status) from e
        except (requests.ConnectionError, requests.Timeout) as e:
            raise NetworkError(f"Failed to {action}: {e}") from e
        except requests.RequestException as e:
            raise PersistenceError(f"Failed to {action}: {e}") from e
        return r

    @staticmethod
    def _parse(r: requests.Response, adapter: TypeAdapter, action: str) -> Any:
        try:
            return adapter.validate_python(r.json())
        except (ValueError, PydanticValidationError) as e:
            raise PersistenceError(f"Failed to {action}: unexpected response body") from e

    def list_movies(
        self,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> List[Movie]:
        """
        Fetch movies. Empty or None filters are not sent.

        The server may filter and sort on these parameters, but the list
        screen applies its own pipeline to whatever comes back.
        """
        params = {
            "search": search,
            "genre": genre,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        params = {k: str(getattr(v, "value", v)) for k, v in params.items() if v}
        r = self._request("GET", "/movies", "load movies", params=params or None)
        return self._parse(r, _MOVIE_LIST, "load movies")

    def get_movie(self, movie_id: int) -> Movie:
        """Fetch a single movie by ID."""
        r = self._request("GET", f"/movies/{movie_id}", "load movie")
        return self._parse(r, TypeAdapter(Movie), "load movie")

    def get_genres(self) -> List[str]:
        """Fetch the ordered list of distinct genres known to the service."""
        r = self._request("GET", "/movies/genres", "load genres")
        return self._parse(r, _GENRE_LIST, "load genres")

    def create_movie(self, form: MovieFormData) -> Movie:
        """Create a movie; the service assigns id and createdAt."""
        r = self._request("POST", "/movies", "create movie", json=form.to_payload())
        return self._parse(r, TypeAdapter(Movie), "create movie")

    def update_movie(self, movie_id: int, form: MovieFormData) -> None:
        """Replace a movie record. The response body is ignored."""
        payload = {"id": movie_id, **form.to_payload()}
        self._request("PUT", f"/movies/{movie_id}", "update movie", json=payload)

    def delete_movie(self, movie_id: int) -> None:
        """Delete a movie. The response body is ignored."""
        self._request("DELETE", f"/movies/{movie_id}", "delete movie")

    def health_check(self) -> bool:
        """Return True if the service answers the genre endpoint."""
        try:
            self.get_genres()
        except PersistenceError as e:
            logger.warning(f"Movie service health check failed: {e}")
            return False
        return True
