"""
Edit movie page.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from watchlist.core.errors import WatchlistError
from watchlist.ui.components.movie_form import progress_message, render_movie_form
from watchlist.ui.utils.session_state import (
    get_edit_target,
    get_form_controller,
    init_session_state,
    set_edit_target,
    set_flash,
)

init_session_state()

if st.button("← Back to Movies", key="back"):
    st.switch_page("app.py")

st.title("✏️ Edit Movie")

movie_id = get_edit_target()
if movie_id is None:
    st.warning("Pick a movie to edit from the list.")
    st.stop()

controller = get_form_controller(movie_id)
if controller.draft is None:
    try:
        with st.spinner("Loading movie..."):
            controller.load_initial()
    except WatchlistError as e:
        st.error(str(e))
        st.stop()

form_input = render_movie_form(controller)
if form_input:
    try:
        with st.spinner(progress_message(form_input)):
            movie = controller.submit(form_input)
        set_edit_target(None)
        set_flash(f'Updated "{movie.title}"')
        st.session_state["reload_movies"] = True
        st.switch_page("app.py")
    except WatchlistError as e:
        st.error(str(e))
