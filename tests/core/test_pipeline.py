"""
Unit tests for the derived list pipeline.
"""

import pytest

from watchlist.core.pipeline import derive, title_sort_key
from watchlist.models.movie import ListOptions, SortBy, SortOrder


def titles(movies):
    return [m.title for m in movies]


@pytest.fixture
def catalog(movie_factory):
    return [
        movie_factory(1, "The Matrix", genre="Sci-Fi", rating=5),
        movie_factory(2, "Amélie", genre="Romance", rating=4),
        movie_factory(3, "Clue", genre="Comedy"),
        movie_factory(4, "Matilda", genre="Comedy", rating=4),
        movie_factory(5, "Alien", genre="sci-fi", rating=2),
    ]


class TestSearch:
    """Tests for the title search step."""

    def test_search_is_case_insensitive_substring(self, catalog):
        """Searching 'mat' matches 'The Matrix' and 'Matilda'."""
        result = derive(catalog, search="mat")
        assert set(titles(result)) == {"The Matrix", "Matilda"}

    def test_search_uppercase_term(self, catalog):
        result = derive(catalog, search="MATRIX")
        assert titles(result) == ["The Matrix"]

    def test_search_no_match(self, catalog):
        assert derive(catalog, search="zzz") == []


class TestGenreFilter:
    """Tests for the exact genre filter."""

    def test_genre_exact_match_only(self, catalog):
        """Genre filter is case-sensitive string equality."""
        result = derive(catalog, genre="Sci-Fi")
        assert titles(result) == ["The Matrix"]
        assert all(m.genre == "Sci-Fi" for m in result)

    def test_genre_excludes_missing_genre(self, movie_factory):
        movies = [movie_factory(1, "A"), movie_factory(2, "B", genre="Drama")]
        assert titles(derive(movies, genre="Drama")) == ["B"]

    def test_search_and_genre_combined(self, catalog):
        result = derive(catalog, search="a", genre="Comedy")
        assert titles(result) == ["Matilda"]


class TestSort:
    """Tests for title and rating ordering."""

    def test_title_ascending_ignores_case(self, movie_factory):
        movies = [movie_factory(1, "Bravo"), movie_factory(2, "alpha"), movie_factory(3, "Charlie")]
        assert titles(derive(movies, sort_by="title")) == ["alpha", "Bravo", "Charlie"]

    def test_title_descending(self, movie_factory):
        movies = [movie_factory(1, "Bravo"), movie_factory(2, "alpha"), movie_factory(3, "Charlie")]
        result = derive(movies, sort_by=SortBy.TITLE, sort_order=SortOrder.DESC)
        assert titles(result) == ["Charlie", "Bravo", "alpha"]

    def test_title_accents_sort_with_base_letter(self, catalog):
        result = derive(catalog)
        assert titles(result)[:2] == ["Alien", "Amélie"]

    def test_missing_rating_counts_as_zero(self, movie_factory):
        movies = [movie_factory(1, "A"), movie_factory(2, "B", rating=3)]
        assert titles(derive(movies, sort_by="rating")) == ["A", "B"]
        assert titles(derive(movies, sort_by="rating", sort_order="desc")) == ["B", "A"]

    def test_rating_ties_keep_input_order_both_directions(self, movie_factory):
        movies = [
            movie_factory(1, "First", rating=4),
            movie_factory(2, "Low", rating=1),
            movie_factory(3, "Second", rating=4),
        ]
        asc = derive(movies, sort_by="rating", sort_order="asc")
        desc = derive(movies, sort_by="rating", sort_order="desc")
        assert titles(asc) == ["Low", "First", "Second"]
        assert titles(desc) == ["First", "Second", "Low"]

    def test_title_sort_key_orders_lowercase_first_on_tie(self):
        assert title_sort_key("abc") < title_sort_key("Abc")


class TestDeriveProperties:
    """General properties of derive()."""

    def test_no_filters_returns_permutation(self, catalog):
        result = derive(catalog, ListOptions(sort_by="rating"))
        assert sorted(m.id for m in result) == sorted(m.id for m in catalog)

    def test_idempotent(self, catalog):
        options = ListOptions(search="a", sort_by="rating", sort_order="desc")
        assert derive(catalog, options) == derive(catalog, options)

    def test_input_not_modified(self, catalog):
        before = list(catalog)
        derive(catalog, sort_by="rating", sort_order="desc")
        assert catalog == before

    def test_overrides_apply_on_top_of_options(self, catalog):
        options = ListOptions(genre="Comedy")
        result = derive(catalog, options, sort_by="rating", sort_order="desc")
        assert titles(result) == ["Matilda", "Clue"]

    def test_end_to_end_example(self, dune, clue):
        movies = [dune, clue]
        assert titles(derive(movies, genre="Sci-Fi")) == ["Dune"]
        assert titles(derive(movies, sort_by="rating", sort_order="desc")) == ["Dune", "Clue"]
