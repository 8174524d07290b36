"""
Results controller: query state, accumulated results, and fetch lifecycle.

Turns each QueryState transition into exactly one outbound request and
merges the decoded page into the accumulated result list.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import requests

from cinenita.core import query_state as qs
from cinenita.core.query_state import QueryState, Tab
from cinenita.core.url_builder import DEFAULT_BASE_URL, build_request_url, redact_api_key
from cinenita.models.movie import Movie, parse_movie_page

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Any]

# Failures collapsed into the single log-and-keep recovery path
FETCH_ERRORS = (requests.RequestException, ValueError)


@dataclass(frozen=True)
class FetchTicket:
    """One issued request, tagged with the generation it belongs to."""

    generation: int
    page: int
    url: str


class ResultsController:
    """
    Owns QueryState, the ResultSet, and the loading flag.

    A fetch has two halves so callers can interleave events the way a UI
    does: a transition begins a fetch (loading becomes True and a ticket is
    pending), then `run_pending()` performs the HTTP call and resolves it.
    Responses whose ticket generation no longer matches are discarded.

    Usage:
        controller = ResultsController(fetcher=fetch_json, api_key=key)
        controller.start()
        controller.run_pending()
        controller.select_genre(28)
        controller.run_pending()
        controller.request_next_page()
        controller.run_pending()
    """

    def __init__(
        self,
        fetcher: Fetcher,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        language: str = "en-US",
        state: Optional[QueryState] = None,
    ):
        """
        Initialize controller.

        Args:
            fetcher: Callable taking a URL and returning the decoded JSON body
            api_key: TMDB API key sent on every request
            base_url: TMDB API base URL
            language: Language for per-category list endpoints
            state: Initial query state (defaults: popular, no genre, no search, page 1)
        """
        self.fetcher = fetcher
        self.api_key = api_key
        self.base_url = base_url
        self.language = language

        self._state = state or QueryState()
        self._results: List[Movie] = []
        self._loading = False
        self._generation = 0
        self._pending: Optional[FetchTicket] = None
        self._total_pages: Optional[int] = None
        self._failed_page: Optional[int] = None
        self.last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def results(self) -> List[Movie]:
        """Accumulated results, in display order (a copy)."""
        return list(self._results)

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> Optional[FetchTicket]:
        return self._pending

    @property
    def has_more(self) -> bool:
        """False once the last page reported by the API has been requested."""
        return self._total_pages is None or self._state.page < self._total_pages

    @property
    def can_retry(self) -> bool:
        return self._failed_page is not None and not self._loading

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start(self) -> FetchTicket:
        """Issue the first-page fetch for the current filters."""
        return self._apply(self._state, force=True)

    def select_tab(self, tab: Tab | str) -> Optional[FetchTicket]:
        return self._apply(qs.with_tab(self._state, tab))

    def select_genre(self, genre_id: Optional[int]) -> Optional[FetchTicket]:
        return self._apply(qs.with_genre(self._state, genre_id))

    def set_search(self, term: Optional[str]) -> Optional[FetchTicket]:
        return self._apply(qs.with_search(self._state, term))

    def request_next_page(self) -> Optional[FetchTicket]:
        """
        Pagination trigger (scroll near bottom / "load more").

        Ignored while a fetch is in flight or when no pages remain.
        """
        if self._loading:
            logger.debug("Next page ignored: fetch in flight")
            return None
        if not self.has_more:
            logger.debug("Next page ignored: last page %s reached", self._total_pages)
            return None
        if self._failed_page == self._state.page:
            # Page 1 never loaded; ask for it again
            return self.begin_fetch()
        self._state = qs.next_page(self._state)
        return self.begin_fetch()

    def retry(self) -> Optional[FetchTicket]:
        """Re-issue the request that last failed. No-op if nothing failed."""
        if self._loading or self._failed_page is None:
            return None
        return self.request_next_page()

    def _apply(self, new_state: QueryState, force: bool = False) -> Optional[FetchTicket]:
        if not force and not qs.filters_changed(self._state, new_state):
            return None
        self._state = qs.first_page(new_state)
        self._results = []
        self._failed_page = None
        self._total_pages = None
        self._generation += 1
        logger.info(
            f"Query changed: tab={self._tab_key()} genre={self._state.genre_id} "
            f"search={self._state.search_term!r} (generation {self._generation})"
        )
        return self.begin_fetch()

    # ------------------------------------------------------------------
    # Fetch lifecycle
    # ------------------------------------------------------------------
    def begin_fetch(self) -> FetchTicket:
        """Build the URL for the current state and mark a fetch in flight."""
        url = build_request_url(
            self._state,
            api_key=self.api_key,
            base_url=self.base_url,
            language=self.language,
        )
        ticket = FetchTicket(generation=self._generation, page=self._state.page, url=url)
        self._pending = ticket
        self._loading = True
        logger.debug("Fetch begun: %s", redact_api_key(url))
        return ticket

    def run_pending(self) -> bool:
        """Execute the pending fetch, if any. Returns True if results were merged."""
        if self._pending is None:
            return False
        return self.fetch(self._pending)

    def fetch(self, ticket: FetchTicket) -> bool:
        """
        Perform the HTTP call for a ticket and resolve it.

        Network, HTTP status and decode errors never propagate.

        Returns:
            True if the response was merged into the results
        """
        try:
            payload = self.fetcher(ticket.url)
        except FETCH_ERRORS as e:
            self.fail_fetch(ticket, e)
            return False
        return self.complete_fetch(ticket, payload)

    def complete_fetch(self, ticket: FetchTicket, payload: Any) -> bool:
        """
        Merge a decoded response: page 1 replaces, later pages append.

        Stale tickets are dropped. A malformed payload leaves the results
        unchanged.

        Returns:
            True if the response was merged into the results
        """
        if self._is_stale(ticket):
            return False
        self._resolve(ticket)

        page = parse_movie_page(payload)
        if page is None:
            self._record_failure(ticket, "Malformed response from movie API")
            return False

        if ticket.page == 1:
            self._results = list(page.results)
        else:
            self._results.extend(page.results)
        if page.total_pages is not None:
            self._total_pages = page.total_pages
        self.last_error = None
        self._failed_page = None

        logger.info(
            f"Page {ticket.page} loaded: {len(page.results)} movies "
            f"({len(self._results)} total)"
        )
        return True

    def fail_fetch(self, ticket: FetchTicket, error: BaseException) -> None:
        """Log a failed fetch and keep the last-known-good results."""
        if self._is_stale(ticket):
            return
        self._resolve(ticket)
        logger.error("Error fetching movies (page %s): %s", ticket.page, error)
        self._record_failure(ticket, f"Could not load movies: {error}")

    def _is_stale(self, ticket: FetchTicket) -> bool:
        if ticket.generation != self._generation:
            logger.debug(
                "Discarding stale response (generation %s, current %s)",
                ticket.generation,
                self._generation,
            )
            return True
        return False

    def _resolve(self, ticket: FetchTicket) -> None:
        if self._pending == ticket:
            self._pending = None
        self._loading = False

    def _record_failure(self, ticket: FetchTicket, message: str) -> None:
        self.last_error = message
        self._failed_page = ticket.page
        # Step back so the next trigger asks for the same page again
        if ticket.page > 1 and self._state.page == ticket.page:
            self._state = qs.previous_page(self._state)

    def _tab_key(self) -> str:
        tab = self._state.tab
        return tab.value if isinstance(tab, Tab) else tab
