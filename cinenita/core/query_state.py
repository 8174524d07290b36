"""
Query parameters driving the next fetch, with pure transition functions.

Every transition returns a new QueryState. Changing the tab, genre, or
search term resets the page to 1; when the value is unchanged the same
state object is returned so callers can detect a no-op with `is`.
"""

from dataclasses import dataclass, replace
from enum import Enum

from cinenita.models.genre import is_known_genre


class Tab(str, Enum):
    """Content feeds offered in the tab bar."""

    POPULAR = "popular"
    TOP_RATED = "top_rated"
    TRENDING = "trending"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


TAB_LABELS = {
    Tab.POPULAR: "Popular",
    Tab.TOP_RATED: "Top Rated",
    Tab.TRENDING: "Trending",
}


def normalize_tab(tab: "Tab | str") -> "Tab | str":
    """Map a tab key to Tab, keeping unknown keys as generic list categories."""
    if isinstance(tab, Tab):
        return tab
    try:
        return Tab(tab)
    except ValueError:
        if not tab:
            raise ValueError("Tab must be a non-empty string")
        return tab


@dataclass(frozen=True)
class QueryState:
    """Current combination of tab, genre, search term and page."""

    tab: Tab | str = Tab.POPULAR
    genre_id: int | None = None
    search_term: str = ""
    page: int = 1

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    @property
    def is_search(self) -> bool:
        return bool(self.search_term)


def with_tab(state: QueryState, tab: Tab | str) -> QueryState:
    """Switch tab, resetting to page 1."""
    tab = normalize_tab(tab)
    if tab == state.tab:
        return state
    return replace(state, tab=tab, page=1)


def with_genre(state: QueryState, genre_id: int | None) -> QueryState:
    """Select a genre (None for all), resetting to page 1."""
    if genre_id is not None and not is_known_genre(genre_id):
        raise ValueError(f"Unknown genre id: {genre_id}")
    if genre_id == state.genre_id:
        return state
    return replace(state, genre_id=genre_id, page=1)


def with_search(state: QueryState, term: str | None) -> QueryState:
    """Set the search term, resetting to page 1. Whitespace-only clears it."""
    term = (term or "").strip()
    if term == state.search_term:
        return state
    return replace(state, search_term=term, page=1)


def first_page(state: QueryState) -> QueryState:
    if state.page == 1:
        return state
    return replace(state, page=1)


def next_page(state: QueryState) -> QueryState:
    return replace(state, page=state.page + 1)


def previous_page(state: QueryState) -> QueryState:
    if state.page == 1:
        return state
    return replace(state, page=state.page - 1)


def filters_changed(old: QueryState, new: QueryState) -> bool:
    """True if the two states differ in tab, genre, or search term."""
    return (old.tab, old.genre_id, old.search_term) != (new.tab, new.genre_id, new.search_term)
