"""
Tests for session state helpers, using a plain dict as the session.
"""

import pytest

from cinenita.core.results_controller import ResultsController
from cinenita.models.movie import Movie
from cinenita.ui.utils import session_state as ss


@pytest.fixture
def session(monkeypatch):
    monkeypatch.delenv("TMDB_BASE_URL", raising=False)
    state = {}
    ss.init_session_state("test-key", state=state)
    return state


def test_init_creates_started_controller(session):
    controller = ss.get_controller(session)
    assert isinstance(controller, ResultsController)
    assert controller.api_key == "test-key"
    assert controller.is_loading
    assert controller.pending.url.startswith("https://api.themoviedb.org/3/trending/movie/week?")


def test_init_is_idempotent(session):
    controller = ss.get_controller(session)
    ss.init_session_state("other-key", state=session)
    assert ss.get_controller(session) is controller


def test_defaults(session):
    assert ss.get_selected_movie(session) is None
    assert ss.is_dark_mode(session) is True
    assert session[ss.SEARCH_INPUT_KEY] == ""


def test_select_and_clear_movie(session):
    movie = Movie(id=603, title="The Matrix")
    ss.select_movie(movie, state=session)
    assert ss.get_selected_movie(session) is movie
    ss.clear_selected_movie(session)
    assert ss.get_selected_movie(session) is None


def test_init_with_invalid_timeout(monkeypatch):
    """A non-numeric TMDB_TIMEOUT does not break session start."""
    monkeypatch.setenv("TMDB_TIMEOUT", "soon")
    state = {}
    ss.init_session_state("test-key", state=state)
    assert ss.get_controller(state).is_loading
