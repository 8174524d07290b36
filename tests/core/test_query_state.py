"""
Unit tests for QueryState transitions.
"""

import pytest

from cinenita.core import query_state as qs
from cinenita.core.query_state import QueryState, Tab


class TestDefaults:

    def test_session_defaults(self):
        state = QueryState()
        assert state.tab == Tab.POPULAR
        assert state.genre_id is None
        assert state.search_term == ""
        assert state.page == 1
        assert not state.is_search

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            QueryState(page=0)

    def test_tab_labels(self):
        assert [t.label for t in Tab] == ["Popular", "Top Rated", "Trending"]


class TestFilterTransitions:
    """Changing tab, genre or search resets to page 1."""

    def test_with_tab_resets_page(self):
        state = QueryState(page=4)
        new = qs.with_tab(state, Tab.TRENDING)
        assert new.tab == Tab.TRENDING
        assert new.page == 1

    def test_with_tab_accepts_string_key(self):
        new = qs.with_tab(QueryState(), "top_rated")
        assert new.tab is Tab.TOP_RATED

    def test_with_tab_keeps_unknown_category(self):
        new = qs.with_tab(QueryState(), "upcoming")
        assert new.tab == "upcoming"

    def test_with_tab_rejects_empty(self):
        with pytest.raises(ValueError):
            qs.with_tab(QueryState(), "")

    def test_same_tab_is_noop(self):
        state = QueryState(page=3)
        assert qs.with_tab(state, "popular") is state

    def test_with_genre_resets_page(self):
        new = qs.with_genre(QueryState(page=2), 35)
        assert new.genre_id == 35
        assert new.page == 1

    def test_with_genre_none_clears(self):
        new = qs.with_genre(QueryState(genre_id=18), None)
        assert new.genre_id is None

    def test_with_genre_unknown_id(self):
        with pytest.raises(ValueError):
            qs.with_genre(QueryState(), 99999)

    def test_same_genre_is_noop(self):
        state = QueryState(genre_id=878, page=5)
        assert qs.with_genre(state, 878) is state

    def test_with_search_strips(self):
        new = qs.with_search(QueryState(page=2), "  batman ")
        assert new.search_term == "batman"
        assert new.page == 1
        assert new.is_search

    def test_whitespace_search_is_no_search(self):
        state = QueryState()
        assert qs.with_search(state, "   ") is state
        assert qs.with_search(state, None) is state

    def test_filters_changed(self):
        old = QueryState()
        assert qs.filters_changed(old, qs.with_genre(old, 28))
        assert not qs.filters_changed(old, qs.next_page(old))


class TestPaging:

    def test_next_page(self):
        assert qs.next_page(QueryState(page=2)).page == 3

    def test_previous_page_floor(self):
        state = QueryState()
        assert qs.previous_page(state) is state
        assert qs.previous_page(QueryState(page=3)).page == 2

    def test_first_page(self):
        assert qs.first_page(QueryState(page=7)).page == 1
