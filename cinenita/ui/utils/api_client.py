"""
TMDB HTTP client for the Streamlit UI.
"""

import requests

from cinenita.config import get_request_timeout


def fetch_json(url: str, timeout: float | None = None) -> dict:
    """
    GET a fully-formed TMDB URL and decode the JSON body.

    Raises requests.HTTPError on error status and requests.JSONDecodeError
    (a ValueError) on an undecodable body.
    """
    r = requests.get(url, timeout=timeout or get_request_timeout())
    r.raise_for_status()
    return r.json()


def make_fetcher(timeout: float | None = None):
    """Return a single-argument fetcher bound to a timeout."""
    def fetcher(url: str) -> dict:
        return fetch_json(url, timeout=timeout)
    return fetcher
