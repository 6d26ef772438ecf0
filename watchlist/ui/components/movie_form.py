"""
Add/edit movie form component.
"""

import streamlit as st

from watchlist.core.form_controller import MovieFormController, MovieFormInput
from watchlist.models.movie import COMMON_GENRES
from watchlist.services.image_upload import ImageFile
from watchlist.ui.components.star_rating import format_stars

NO_GENRE = "Select a genre"
RATING_OPTIONS = [0, 1, 2, 3, 4, 5]


def submit_label(controller: MovieFormController) -> str:
    return "Update Movie" if controller.is_edit else "Add Movie"


def render_movie_form(controller: MovieFormController) -> MovieFormInput | None:
    """
    Render the add or edit form, prefilled from the controller's draft.

    Args:
        controller: Form controller owning the draft and status

    Returns:
        Form input if submitted, else None.
    """
    draft = controller.draft or MovieFormInput()
    genres = [NO_GENRE] + COMMON_GENRES
    if draft.genre and draft.genre not in COMMON_GENRES:
        genres.append(draft.genre)

    with st.form("movie_form"):
        title = st.text_input("Title *", value=draft.title, placeholder="Enter movie title")
        genre = st.selectbox(
            "Genre",
            options=genres,
            index=genres.index(draft.genre) if draft.genre in genres else 0,
        )
        rating = st.selectbox(
            "Rating",
            options=RATING_OPTIONS,
            index=draft.rating if draft.rating in RATING_OPTIONS else 0,
            format_func=lambda x: "No rating" if x == 0 else f"{x} {format_stars(x)}",
        )
        if draft.poster_url:
            st.image(draft.poster_url, caption="Current poster", width=200)
        uploaded = st.file_uploader("Poster image", type=["png", "jpg", "jpeg", "gif", "webp"])
        if uploaded is not None:
            st.image(uploaded, caption="Preview", width=200)
        submitted = st.form_submit_button(submit_label(controller))
        if submitted:
            return MovieFormInput(
                title=title,
                genre=None if genre == NO_GENRE else genre,
                rating=rating or None,
                poster_url=draft.poster_url,
                image_file=ImageFile.from_uploaded_file(uploaded) if uploaded is not None else None,
            )
    return None


def progress_message(form_input: MovieFormInput) -> str:
    """Spinner text shown while submit() runs."""
    if form_input.image_file is not None:
        return "Uploading image and saving..."
    return "Saving..."
