"""
Smoke tests for the Streamlit app using AppTest with a stubbed TMDB.
"""

from pathlib import Path
from urllib.parse import urlsplit

import pytest
import requests
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[2] / "cinenita" / "ui" / "app.py")


class FakeResponse:

    def __init__(self, body):
        self.body = body

    def raise_for_status(self):
        pass

    def json(self):
        return self.body


@pytest.fixture
def tmdb(monkeypatch):
    """Stub requests.get; answers every URL with two movies and records paths."""
    paths = []

    def fake_get(url, timeout=None):
        paths.append(urlsplit(url).path)
        page = len(paths)
        return FakeResponse({
            "page": 1,
            "total_pages": 3,
            "results": [
                {"id": page * 10 + 1, "title": f"Alpha {page}", "vote_average": 6.5},
                {"id": page * 10 + 2, "title": f"Beta {page}", "vote_average": None},
            ],
        })

    monkeypatch.setattr(requests, "get", fake_get)
    monkeypatch.setenv("TMDB_API_KEY", "test-key")
    monkeypatch.delenv("TMDB_BASE_URL", raising=False)
    return paths


def markdown_text(at):
    return " ".join(m.value for m in at.markdown)


def test_missing_api_key_stops(monkeypatch):
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    at = AppTest.from_file(APP_PATH).run()
    assert not at.exception
    assert "TMDB API key" in at.warning[0].value


def test_initial_load_renders_popular_feed(tmdb):
    at = AppTest.from_file(APP_PATH).run()
    assert not at.exception
    assert tmdb == ["/3/trending/movie/week"]
    text = markdown_text(at)
    assert "Alpha 1" in text
    assert "Beta 1" in text


def test_tab_click_replaces_results(tmdb):
    at = AppTest.from_file(APP_PATH).run()
    at.button(key="tab_top_rated").click().run()
    assert not at.exception
    assert tmdb[-1] == "/3/movie/top_rated"
    text = markdown_text(at)
    assert "Alpha 2" in text
    assert "Alpha 1" not in text


def test_load_more_appends(tmdb):
    at = AppTest.from_file(APP_PATH).run()
    at.button(key="load_more").click().run()
    assert not at.exception
    assert len(tmdb) == 2
    text = markdown_text(at)
    assert "Alpha 1" in text
    assert "Alpha 2" in text
