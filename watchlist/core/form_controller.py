"""
Add/edit form controller.

Validates the form, uploads the poster (if a file was picked), then
creates or updates the record. Upload always finishes before the
create/update call starts; a failed upload never reaches the movie
service.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from watchlist.core.errors import PersistenceError, UploadError, ValidationError
from watchlist.models.movie import Movie, MovieFormData
from watchlist.services.image_upload import ImageFile

logger = logging.getLogger(__name__)


class FormStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    SAVING = "saving"
    DONE = "done"


@dataclass
class MovieFormInput:
    """Raw values entered in the form."""

    title: str = ""
    genre: Optional[str] = None
    rating: Optional[int] = None
    poster_url: Optional[str] = None
    image_file: Optional[ImageFile] = None

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieFormInput":
        """Prefill the form from an existing record (edit flow)."""
        return cls(
            title=movie.title,
            genre=movie.genre,
            rating=movie.rating,
            poster_url=movie.poster_url,
        )


class MovieFormController:
    """
    Drives one add or edit form.

    With ``movie_id`` set, submit() updates that record; otherwise it
    creates a new one. The last submitted input is kept in ``draft`` until
    a submit succeeds so the form can be re-rendered after a failure.
    """

    def __init__(self, movie_service, image_uploader, movie_id: Optional[int] = None):
        self.movie_service = movie_service
        self.image_uploader = image_uploader
        self.movie_id = movie_id
        self.status = FormStatus.IDLE
        self.draft: Optional[MovieFormInput] = None
        self.original: Optional[Movie] = None

    @property
    def is_edit(self) -> bool:
        return self.movie_id is not None

    @property
    def busy(self) -> bool:
        return self.status in (FormStatus.UPLOADING, FormStatus.SAVING)

    def load_initial(self, movie_id: Optional[int] = None) -> MovieFormInput:
        """
        Fetch the record being edited and use it as the draft.

        Raises:
            PersistenceError: If the record cannot be loaded
        """
        if movie_id is not None:
            self.movie_id = movie_id
        if self.movie_id is None:
            raise ValueError("load_initial() needs a movie id")
        try:
            movie = self.movie_service.get_movie(self.movie_id)
        except PersistenceError as e:
            logger.error(f"Failed to load movie {self.movie_id}: {e}")
            raise
        self.original = movie
        self.draft = MovieFormInput.from_movie(movie)
        return self.draft

    @staticmethod
    def validate(form: MovieFormInput) -> MovieFormData:
        """
        Check the input and build the write payload.

        Raises:
            ValidationError: Title blank or rating outside 1-5
        """
        title = (form.title or "").strip()
        if not title:
            raise ValidationError("Title is required")
        if form.rating is not None and not 1 <= form.rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")
        return MovieFormData(
            title=title,
            genre=form.genre or None,
            rating=form.rating,
            poster_url=form.poster_url or None,
        )

    def submit(self, form: MovieFormInput) -> Movie:
        """
        Validate, upload the poster if any, then save.

        Args:
            form: Values entered by the user

        Returns:
            The created or updated movie

        Raises:
            ValidationError: Invalid input, nothing sent
            UploadError: Poster upload failed, record not saved
            PersistenceError: Create/update call failed
        """
        self.draft = form
        data = self.validate(form)

        if form.image_file is not None:
            self.status = FormStatus.UPLOADING
            try:
                data.poster_url = self.image_uploader.upload(form.image_file)
            except UploadError as e:
                logger.error(f"Poster upload failed: {e}")
                self.status = FormStatus.IDLE
                raise

        self.status = FormStatus.SAVING
        try:
            if self.is_edit:
                self.movie_service.update_movie(self.movie_id, data)
            else:
                movie = self.movie_service.create_movie(data)
        except PersistenceError as e:
            action = "update" if self.is_edit else "create"
            logger.error(f"Failed to {action} movie: {e}")
            self.status = FormStatus.IDLE
            raise

        if self.is_edit:
            movie = self._reread(data)

        logger.info(f"Saved movie {movie.id} ({movie.title!r})")
        self.status = FormStatus.DONE
        self.draft = None
        return movie

    def _reread(self, data: MovieFormData) -> Movie:
        # The PUT already succeeded; a failed re-read must not undo that
        try:
            return self.movie_service.get_movie(self.movie_id)
        except PersistenceError as e:
            logger.warning(f"Saved movie {self.movie_id} but could not re-read it: {e}")
        fields = data.model_dump()
        if self.original is not None:
            return self.original.model_copy(update=fields)
        return Movie(id=self.movie_id, created_at="", **fields)
