"""
Core browsing logic: query state, URL selection, and the results controller.
"""

from cinenita.core.query_state import QueryState, Tab
from cinenita.core.url_builder import build_request_url, select_endpoint
from cinenita.core.results_controller import FetchTicket, ResultsController

__all__ = [
    "QueryState",
    "Tab",
    "build_request_url",
    "select_endpoint",
    "FetchTicket",
    "ResultsController",
]
