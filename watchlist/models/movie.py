"""
Pydantic schemas for movie records exchanged with the remote movie service.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Suggestions offered by the add/edit form. Independent of GET /movies/genres.
COMMON_GENRES = [
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Fantasy",
    "Horror",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "Western",
]


class Movie(BaseModel):
    """
    A movie record as returned by the service.

    Server data is taken as is; input checks live on MovieFormData.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    title: str
    genre: str | None = None
    rating: int | None = None
    poster_url: str | None = Field(None, alias="posterUrl")
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(None, alias="updatedAt")


class MovieFormData(BaseModel):
    """Write payload for POST /movies and PUT /movies/{id}."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    genre: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    poster_url: str | None = Field(None, alias="posterUrl")

    def to_payload(self) -> dict:
        """JSON body with wire field names; absent optionals are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SortBy(str, Enum):
    TITLE = "title"
    RATING = "rating"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ListOptions(BaseModel):
    """Search, filter and sort parameters of the list screen."""

    search: str = ""
    genre: str = ""
    sort_by: SortBy = SortBy.TITLE
    sort_order: SortOrder = SortOrder.ASC
