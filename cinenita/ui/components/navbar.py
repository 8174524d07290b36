"""
Top navigation bar: logo, search box, and theme toggle.
"""

import streamlit as st

from cinenita.core.results_controller import ResultsController
from cinenita.ui.utils.session_state import (
    DARK_MODE_KEY,
    SEARCH_INPUT_KEY,
    clear_selected_movie,
    is_dark_mode,
)

DARK_CSS = """
<style>
.stApp { background-color: #0f0f14; color: #f1f1f1; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #f1f1f1; }
</style>
"""

LIGHT_CSS = """
<style>
.stApp { background-color: #fafafa; color: #111111; }
</style>
"""


def _on_search_change(controller: ResultsController) -> None:
    clear_selected_movie()
    controller.set_search(st.session_state[SEARCH_INPUT_KEY])


def render_navbar(controller: ResultsController) -> None:
    """Render logo, search input and dark-mode toggle."""
    col1, col2, col3 = st.columns([2, 4, 1])
    with col1:
        st.title("🎬 CineNita")
    with col2:
        st.text_input(
            "Search movies",
            key=SEARCH_INPUT_KEY,
            placeholder="Search movies...",
            on_change=_on_search_change,
            args=(controller,),
            label_visibility="collapsed",
        )
    with col3:
        st.toggle("Dark mode", key=DARK_MODE_KEY)

    st.markdown(DARK_CSS if is_dark_mode() else LIGHT_CSS, unsafe_allow_html=True)
