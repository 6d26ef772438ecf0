"""
Unit tests for the movie schemas.
"""

import pytest
from pydantic import ValidationError

from watchlist.models.movie import COMMON_GENRES, ListOptions, Movie, MovieFormData, SortBy, SortOrder


class TestMovie:

    def test_parses_wire_names(self):
        movie = Movie.model_validate({
            "id": 3,
            "title": "Heat",
            "posterUrl": "https://img.example.com/heat.jpg",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-02-01T00:00:00Z",
        })
        assert movie.poster_url == "https://img.example.com/heat.jpg"
        assert movie.updated_at == "2024-02-01T00:00:00Z"
        assert movie.genre is None
        assert movie.rating is None

    def test_accepts_server_data_as_is(self):
        """Odd records from the service are shown, not dropped."""
        movie = Movie(id=1, title="", rating=7, created_at="2024-01-01")
        assert movie.title == ""
        assert movie.rating == 7

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError):
            Movie.model_validate({"id": 1})


class TestMovieFormData:

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_range(self, rating):
        with pytest.raises(ValidationError):
            MovieFormData(title="Heat", rating=rating)

    def test_title_required(self):
        with pytest.raises(ValidationError):
            MovieFormData(title="")

    def test_payload_uses_wire_names_and_skips_none(self):
        form = MovieFormData(title="Heat", poster_url="https://img.example.com/heat.jpg")
        assert form.to_payload() == {"title": "Heat", "posterUrl": "https://img.example.com/heat.jpg"}


def test_list_options_defaults():
    options = ListOptions()
    assert options.search == ""
    assert options.genre == ""
    assert options.sort_by == SortBy.TITLE
    assert options.sort_order == SortOrder.ASC


def test_common_genres():
    assert len(COMMON_GENRES) == 14
    assert len(set(COMMON_GENRES)) == 14
    assert "Sci-Fi" in COMMON_GENRES
