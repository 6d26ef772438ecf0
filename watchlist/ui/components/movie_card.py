"""
Movie display card component.
"""

import streamlit as st

from watchlist.models.movie import Movie
from watchlist.ui.components.star_rating import format_stars


def render_movie_card(movie: Movie, on_edit: callable, on_delete: callable) -> None:
    """
    Render a movie card with Edit and Delete buttons.

    Args:
        movie: Movie to show
        on_edit: Callback(movie_id) when Edit is clicked
        on_delete: Callback(movie_id) when Delete is clicked
    """
    with st.container(border=True):
        if movie.poster_url:
            st.image(movie.poster_url, width="stretch")
        else:
            st.markdown("### 🎬")
            st.caption("No poster")
        st.markdown(f"**{movie.title}**")
        if movie.genre:
            st.caption(movie.genre)
        st.write(format_stars(movie.rating))
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Edit", key=f"edit_{movie.id}", width="stretch"):
                on_edit(movie.id)
        with col2:
            if st.button("Delete", key=f"delete_{movie.id}", width="stretch"):
                on_delete(movie.id)
