"""
Tab and genre selector rows.
"""

import streamlit as st

from cinenita.core.query_state import Tab
from cinenita.core.results_controller import ResultsController
from cinenita.models.genre import GENRES
from cinenita.ui.utils.session_state import clear_selected_movie


def _select_tab(controller: ResultsController, tab: Tab) -> None:
    clear_selected_movie()
    controller.select_tab(tab)


def _select_genre(controller: ResultsController, genre_id: int | None) -> None:
    clear_selected_movie()
    controller.select_genre(genre_id)


def render_tab_bar(controller: ResultsController) -> None:
    """One button per tab; the active tab is highlighted."""
    active = controller.state.tab
    cols = st.columns(len(Tab))
    for col, tab in zip(cols, Tab):
        with col:
            st.button(
                tab.label,
                key=f"tab_{tab.value}",
                type="primary" if tab == active else "secondary",
                on_click=_select_tab,
                args=(controller, tab),
                use_container_width=True,
            )


def render_genre_bar(controller: ResultsController) -> None:
    """'All' plus one button per genre; the selected genre is highlighted."""
    selected = controller.state.genre_id
    cols = st.columns(len(GENRES) + 1)
    with cols[0]:
        st.button(
            "All",
            key="genre_all",
            type="primary" if selected is None else "secondary",
            on_click=_select_genre,
            args=(controller, None),
            use_container_width=True,
        )
    for col, genre in zip(cols[1:], GENRES):
        with col:
            st.button(
                genre.name,
                key=f"genre_{genre.id}",
                type="primary" if selected == genre.id else "secondary",
                on_click=_select_genre,
                args=(controller, genre.id),
                use_container_width=True,
            )
