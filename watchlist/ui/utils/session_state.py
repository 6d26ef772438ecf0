"""
Session state helpers for Streamlit.
"""

import streamlit as st

from watchlist.core.form_controller import FormStatus, MovieFormController
from watchlist.core.list_controller import MovieListController
from watchlist.ui.utils.api_client import build_image_uploader, build_movie_service


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "movie_service" not in st.session_state:
        st.session_state["movie_service"] = build_movie_service()
    if "image_uploader" not in st.session_state:
        st.session_state["image_uploader"] = build_image_uploader()
    if "list_controller" not in st.session_state:
        st.session_state["list_controller"] = MovieListController(st.session_state["movie_service"])
    if "edit_movie_id" not in st.session_state:
        st.session_state["edit_movie_id"] = None
    if "flash" not in st.session_state:
        st.session_state["flash"] = None


def get_list_controller() -> MovieListController:
    """Get the list screen controller for this session."""
    return st.session_state["list_controller"]


def get_form_controller(movie_id: int | None = None) -> MovieFormController:
    """
    Get the form controller for the add form or for editing ``movie_id``.

    A new controller is created when the target changes, so the add and
    edit screens never share a draft.
    """
    key = "form_controller"
    controller = st.session_state.get(key)
    if controller is None or controller.movie_id != movie_id or controller.status == FormStatus.DONE:
        controller = MovieFormController(
            st.session_state["movie_service"],
            st.session_state["image_uploader"],
            movie_id=movie_id,
        )
        st.session_state[key] = controller
    return controller


def set_edit_target(movie_id: int | None) -> None:
    """Remember which movie the edit page should open."""
    st.session_state["edit_movie_id"] = movie_id


def get_edit_target() -> int | None:
    return st.session_state.get("edit_movie_id")


def set_flash(message: str | None) -> None:
    """Queue a success message shown once on the next page render."""
    st.session_state["flash"] = message


def pop_flash() -> str | None:
    message = st.session_state.get("flash")
    st.session_state["flash"] = None
    return message
