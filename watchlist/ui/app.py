"""
Streamlit main app: the movie watchlist list screen.

Run: streamlit run watchlist/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from watchlist.core.errors import WatchlistError
from watchlist.core.list_controller import ConfirmingDelete
from watchlist.models.movie import SortBy, SortOrder
from watchlist.ui.components.movie_card import render_movie_card
from watchlist.ui.utils.session_state import (
    get_list_controller,
    init_session_state,
    pop_flash,
    set_edit_target,
)
from watchlist.utils.logging_config import configure_ui_logging

st.set_page_config(
    page_title="Movie Watchlist",
    page_icon="🎬",
    layout="wide",
)

configure_ui_logging()
init_session_state()

ALL_GENRES = "All Genres"
SORT_LABELS = {SortBy.TITLE: "Title", SortBy.RATING: "Rating"}
ORDER_LABELS = {SortOrder.ASC: "Ascending", SortOrder.DESC: "Descending"}
GRID_COLUMNS = 4

controller = get_list_controller()

col1, col2 = st.columns([4, 1])
with col1:
    st.title("🎬 Movie Watchlist")
with col2:
    if st.button("➕ Add Movie", width="stretch"):
        st.switch_page("pages/1_add_movie.py")

flash = pop_flash()
if flash:
    st.success(flash)

if not controller.loaded or st.session_state.pop("reload_movies", False):
    with st.spinner("Loading movies..."):
        try:
            controller.load()
        except WatchlistError as e:
            st.error(str(e))

# Widget keys are seeded from the controller only when missing (first run,
# or after returning from another page), then the widgets own their values.
genre_options = [ALL_GENRES] + controller.genres
if "list_search" not in st.session_state:
    st.session_state["list_search"] = controller.options.search
if st.session_state.get("list_genre") not in genre_options:
    current_genre = controller.options.genre
    st.session_state["list_genre"] = current_genre if current_genre in genre_options else ALL_GENRES
if "list_sort_by" not in st.session_state:
    st.session_state["list_sort_by"] = controller.options.sort_by
if "list_sort_order" not in st.session_state:
    st.session_state["list_sort_order"] = controller.options.sort_order

# Search, filter and sort controls
col1, col2, col3, col4 = st.columns([3, 2, 1, 1])
with col1:
    search = st.text_input("Search", key="list_search", placeholder="Search by title...")
with col2:
    genre = st.selectbox("Genre", options=genre_options, key="list_genre")
with col3:
    sort_by = st.selectbox("Sort by", options=list(SortBy), key="list_sort_by", format_func=SORT_LABELS.get)
with col4:
    sort_order = st.selectbox("Order", options=list(SortOrder), key="list_sort_order", format_func=ORDER_LABELS.get)

controller.set_options(
    search=search,
    genre="" if genre == ALL_GENRES else genre,
    sort_by=sort_by,
    sort_order=sort_order,
)


def handle_edit(movie_id: int) -> None:
    set_edit_target(movie_id)
    st.switch_page("pages/2_edit_movie.py")


def handle_delete(movie_id: int) -> None:
    controller.request_delete(movie_id)
    st.rerun()


delete_error = st.session_state.pop("delete_error", None)
if delete_error:
    st.error(delete_error)

# Cancel and Delete are the only ways out of the confirmation
if isinstance(controller.delete_state, ConfirmingDelete):
    with st.container(border=True):
        st.warning(
            f'Are you sure you want to delete "{controller.delete_state.movie.title}"? '
            "This cannot be undone."
        )
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Cancel", key="cancel_delete", width="stretch"):
                controller.cancel_delete()
                st.rerun()
        with col2:
            if st.button("Delete", key="confirm_delete", type="primary", width="stretch"):
                try:
                    with st.spinner("Deleting..."):
                        controller.confirm_delete()
                except WatchlistError as e:
                    st.session_state["delete_error"] = str(e)
                st.rerun()

st.divider()

movies = controller.visible
if not movies:
    st.info(controller.empty_message)
else:
    st.caption(f"{len(movies)} of {len(controller.movies)} movies")
    for start in range(0, len(movies), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, movie in zip(cols, movies[start:start + GRID_COLUMNS]):
            with col:
                render_movie_card(movie, on_edit=handle_edit, on_delete=handle_delete)
