"""
Movie detail overlay.
"""

import streamlit as st

from cinenita.models.movie import Movie


@st.dialog("Movie details", width="large")
def render_movie_detail(movie: Movie, image_base_url: str, poster_size: str = "w500") -> None:
    """Show poster, rating, release date and synopsis in a modal dialog."""
    col1, col2 = st.columns([1, 2])
    with col1:
        st.image(movie.poster_url(image_base_url, poster_size))
    with col2:
        st.subheader(movie.display_title)
        st.markdown(f"⭐ {movie.rating_label()}")
        st.caption(f"Release: {movie.release_date or 'Unknown'}")
        if movie.genre_names:
            st.caption(" | ".join(movie.genre_names))
        st.write(movie.overview)
    if st.button("Close"):
        st.rerun()
