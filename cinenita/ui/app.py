"""
Streamlit main app for CineNita movie discovery.

Run: streamlit run cinenita/ui/app.py --server.port 8501
"""

import streamlit as st

from cinenita.config import get_api_key, get_image_base_url, get_log_level, get_poster_size
from cinenita.ui.components.filter_bar import render_genre_bar, render_tab_bar
from cinenita.ui.components.movie_card import render_movie_grid
from cinenita.ui.components.movie_detail import render_movie_detail
from cinenita.ui.components.navbar import render_navbar
from cinenita.ui.utils.session_state import (
    clear_selected_movie,
    get_controller,
    get_selected_movie,
    init_session_state,
)
from cinenita.utils.logging_config import configure_ui_logging

st.set_page_config(
    page_title="CineNita",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="collapsed",
)

configure_ui_logging(level=get_log_level())

api_key = get_api_key()
if not api_key:
    st.warning("TMDB API key is not configured.")
    st.info("Set TMDB_API_KEY in the environment and restart: streamlit run cinenita/ui/app.py")
    st.stop()

init_session_state(api_key)
controller = get_controller()
image_base_url = get_image_base_url()
poster_size = get_poster_size()

render_navbar(controller)
render_tab_bar(controller)
render_genre_bar(controller)

st.divider()

# Resolve the fetch begun by this run's input callback (or session start)
if controller.pending is not None:
    with st.spinner("Loading more movies..."):
        controller.run_pending()

movies = controller.results
if movies:
    render_movie_grid(movies, image_base_url, poster_size)
elif not controller.last_error:
    st.info("No movies found.")

if controller.last_error:
    col1, col2 = st.columns([4, 1])
    with col1:
        st.caption(controller.last_error)
    with col2:
        st.button(
            "Retry",
            key="retry",
            on_click=controller.retry,
            disabled=not controller.can_retry,
        )

# Stands in for the scroll-near-bottom observer
if movies and controller.has_more:
    st.button(
        "Load more",
        key="load_more",
        on_click=controller.request_next_page,
        disabled=controller.is_loading,
        use_container_width=True,
    )

selected = get_selected_movie()
if selected is not None:
    clear_selected_movie()
    render_movie_detail(selected, image_base_url, poster_size)
