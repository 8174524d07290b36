"""
Movie display card and result grid components.
"""

import streamlit as st

from cinenita.models.movie import Movie
from cinenita.ui.utils.session_state import select_movie


def render_movie_card(
    movie: Movie,
    index: int,
    image_base_url: str,
    poster_size: str = "w500",
) -> None:
    """
    Render a poster card with title, rating and a details button.

    Args:
        movie: Movie to display
        index: Position in the result list (keeps widget keys unique when
            the API repeats a movie across pages)
        image_base_url: Image CDN base URL
        poster_size: Poster width variant
    """
    with st.container(border=True):
        st.image(movie.poster_url(image_base_url, poster_size), caption=None)
        st.markdown(f"**{movie.title}**")
        st.caption(f"⭐ {movie.rating_label()}")
        st.button(
            "Details",
            key=f"details_{index}_{movie.id}",
            on_click=select_movie,
            args=(movie,),
        )


def render_movie_grid(
    movies: list[Movie],
    image_base_url: str,
    poster_size: str = "w500",
    columns: int = 5,
) -> None:
    """Lay out movie cards in rows of `columns`."""
    for start in range(0, len(movies), columns):
        row = st.columns(columns)
        for offset, movie in enumerate(movies[start:start + columns]):
            with row[offset]:
                render_movie_card(movie, start + offset, image_base_url, poster_size)
