"""
Pydantic schemas for TMDB movie records and result pages.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from cinenita.models.genre import genre_name

logger = logging.getLogger(__name__)

PLACEHOLDER_POSTER = "https://placehold.co/500x750?text=No+Poster"


class Movie(BaseModel):
    """A movie as returned in a TMDB list/search `results` array."""

    id: int
    title: str = ""
    vote_average: float | None = None
    poster_path: str | None = None
    overview: str = ""
    release_date: str = ""
    genre_ids: list[int] = Field(default_factory=list)

    @field_validator("title", "overview", "release_date", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def rating_label(self) -> str:
        """Rating with one decimal, or 'N/A' when missing or zero."""
        if not self.vote_average:
            return "N/A"
        return f"{self.vote_average:.1f}"

    def poster_url(self, image_base_url: str, size: str = "w500") -> str:
        """Full poster URL on the image CDN, or a placeholder image."""
        if not self.poster_path:
            return PLACEHOLDER_POSTER
        return f"{image_base_url.rstrip('/')}/{size}{self.poster_path}"

    @property
    def release_year(self) -> int | None:
        try:
            return int(self.release_date[:4])
        except ValueError:
            return None

    @property
    def display_title(self) -> str:
        """Title with the release year appended when known."""
        year = self.release_year
        return f"{self.title} ({year})" if year else self.title

    @property
    def genre_names(self) -> list[str]:
        """Names of this movie's genres that appear in the genre table."""
        return [name for name in (genre_name(g) for g in self.genre_ids) if name]


class MoviePage(BaseModel):
    """One decoded page of results."""

    page: int | None = None
    total_pages: int | None = None
    total_results: int | None = None
    results: list[Movie]


def parse_movie_page(payload: Any) -> MoviePage | None:
    """
    Decode a TMDB list envelope.

    Records that fail validation are skipped. Returns None when the payload
    is not an object or has no `results` list.

    Args:
        payload: Decoded JSON body

    Returns:
        MoviePage, or None for a malformed payload
    """
    if not isinstance(payload, dict):
        logger.warning("Expected JSON object, got %s", type(payload).__name__)
        return None
    raw_results = payload.get("results")
    if not isinstance(raw_results, list):
        logger.warning("Response has no 'results' list (keys: %s)", sorted(payload))
        return None

    movies: list[Movie] = []
    for raw in raw_results:
        try:
            movies.append(Movie.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping malformed movie record: %s", e.errors()[:1])

    def _int_or_none(key: str) -> int | None:
        value = payload.get(key)
        return value if isinstance(value, int) else None

    return MoviePage(
        page=_int_or_none("page"),
        total_pages=_int_or_none("total_pages"),
        total_results=_int_or_none("total_results"),
        results=movies,
    )
