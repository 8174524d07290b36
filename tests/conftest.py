"""
Shared fixtures: canned TMDB payloads and a recording fake fetcher.
"""

import pytest

from cinenita.core.results_controller import ResultsController


def movie_record(movie_id: int, title: str | None = None, **overrides) -> dict:
    """Build a TMDB-shaped movie record."""
    record = {
        "id": movie_id,
        "title": title or f"Movie {movie_id}",
        "vote_average": 7.25,
        "poster_path": f"/poster{movie_id}.jpg",
        "overview": f"Overview of movie {movie_id}",
        "release_date": "2020-05-01",
        "genre_ids": [28, 12],
        "popularity": 100.0,
    }
    record.update(overrides)
    return record


def page_payload(ids, total_pages: int = 10, page: int = 1) -> dict:
    return {
        "page": page,
        "results": [movie_record(i) for i in ids],
        "total_pages": total_pages,
        "total_results": total_pages * 20,
    }


class FakeFetcher:
    """Returns queued responses (or raises queued exceptions) and records URLs."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.urls = []

    def queue(self, response):
        self.responses.append(response)

    def __call__(self, url):
        self.urls.append(url)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def controller(fetcher):
    return ResultsController(fetcher=fetcher, api_key="test-key")


@pytest.fixture
def make_page():
    """Factory for TMDB list envelopes."""
    return page_payload


@pytest.fixture
def make_movie():
    """Factory for TMDB movie records."""
    return movie_record
