"""
Session state helpers for Streamlit.

Helpers accept an optional `state` mapping so they can be exercised
outside a running Streamlit session; it defaults to st.session_state.
"""

from collections.abc import MutableMapping

import streamlit as st

from cinenita.config import get_api_base_url, get_language, get_request_timeout
from cinenita.core.results_controller import ResultsController
from cinenita.models.movie import Movie
from cinenita.ui.utils.api_client import make_fetcher

CONTROLLER_KEY = "results_controller"
SELECTED_MOVIE_KEY = "selected_movie"
DARK_MODE_KEY = "dark_mode"
SEARCH_INPUT_KEY = "search_input"


def _session(state: MutableMapping | None) -> MutableMapping:
    return st.session_state if state is None else state


def init_session_state(api_key: str, state: MutableMapping | None = None) -> None:
    """Initialize session state keys if not present."""
    state = _session(state)
    if CONTROLLER_KEY not in state:
        controller = ResultsController(
            fetcher=make_fetcher(get_request_timeout()),
            api_key=api_key,
            base_url=get_api_base_url(),
            language=get_language(),
        )
        controller.start()
        state[CONTROLLER_KEY] = controller
    if SELECTED_MOVIE_KEY not in state:
        state[SELECTED_MOVIE_KEY] = None
    if DARK_MODE_KEY not in state:
        state[DARK_MODE_KEY] = True
    if SEARCH_INPUT_KEY not in state:
        state[SEARCH_INPUT_KEY] = ""


def get_controller(state: MutableMapping | None = None) -> ResultsController:
    """Get the session's results controller."""
    return _session(state)[CONTROLLER_KEY]


def get_selected_movie(state: MutableMapping | None = None) -> Movie | None:
    """Get the movie shown in the detail overlay, if any."""
    return _session(state).get(SELECTED_MOVIE_KEY)


def select_movie(movie: Movie, state: MutableMapping | None = None) -> None:
    """Open the detail overlay for a movie."""
    _session(state)[SELECTED_MOVIE_KEY] = movie


def clear_selected_movie(state: MutableMapping | None = None) -> None:
    """Close the detail overlay."""
    _session(state)[SELECTED_MOVIE_KEY] = None


def is_dark_mode(state: MutableMapping | None = None) -> bool:
    return bool(_session(state).get(DARK_MODE_KEY, True))
