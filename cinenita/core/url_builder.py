"""
Request URL selection for a QueryState.

Rules are checked in priority order and the first match wins:

1. non-empty search term  -> /search/movie (tab and genre ignored)
2. trending tab           -> /trending/movie/week (genre ignored)
3. genre selected         -> /discover/movie sorted by popularity (tab ignored)
4. popular tab            -> /trending/movie/week (popular reuses the trending feed)
5. top_rated tab          -> /movie/top_rated
6. any other tab          -> /movie/<tab>
"""

import re

import requests

from cinenita.core.query_state import QueryState, Tab

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
TRENDING_WEEK_PATH = "/trending/movie/week"

_API_KEY_RE = re.compile(r"(api_key=)[^&]+")


def select_endpoint(state: QueryState, language: str = "en-US") -> tuple[str, dict]:
    """
    Choose the endpoint path and query parameters for a state.

    Args:
        state: Query parameters
        language: Language sent with the per-category list endpoints

    Returns:
        (path, params) without the API key
    """
    if state.is_search:
        return "/search/movie", {"query": state.search_term, "page": state.page}
    if state.tab == Tab.TRENDING:
        return TRENDING_WEEK_PATH, {"page": state.page}
    if state.genre_id is not None:
        return "/discover/movie", {
            "with_genres": state.genre_id,
            "sort_by": "popularity.desc",
            "page": state.page,
        }
    if state.tab == Tab.POPULAR:
        return TRENDING_WEEK_PATH, {"page": state.page}
    if state.tab == Tab.TOP_RATED:
        return "/movie/top_rated", {"language": language, "page": state.page}
    tab = state.tab.value if isinstance(state.tab, Tab) else state.tab
    return f"/movie/{tab}", {"language": language, "page": state.page}


def build_request_url(
    state: QueryState,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    language: str = "en-US",
) -> str:
    """Build the fully-formed, encoded GET URL for a state."""
    path, params = select_endpoint(state, language=language)
    prepared = requests.Request(
        "GET",
        f"{base_url.rstrip('/')}{path}",
        params={"api_key": api_key, **params},
    ).prepare()
    return prepared.url


def redact_api_key(url: str) -> str:
    """Mask the api_key query parameter for logging."""
    return _API_KEY_RE.sub(r"\1***", url)
