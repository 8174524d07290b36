"""
Genre table used by the genre filter.

Ids must match TMDB's movie genre ids for discovery filtering to work.
"""

from pydantic import BaseModel


class Genre(BaseModel):
    """A single filterable genre."""

    id: int
    name: str


GENRES: tuple[Genre, ...] = (
    Genre(id=28, name="Action"),
    Genre(id=12, name="Adventure"),
    Genre(id=16, name="Animation"),
    Genre(id=35, name="Comedy"),
    Genre(id=80, name="Crime"),
    Genre(id=18, name="Drama"),
    Genre(id=10751, name="Family"),
    Genre(id=14, name="Fantasy"),
    Genre(id=878, name="Sci-Fi"),
)

GENRE_NAMES: dict[int, str] = {g.id: g.name for g in GENRES}


def is_known_genre(genre_id: int) -> bool:
    """Return True if genre_id is in the genre table."""
    return genre_id in GENRE_NAMES


def genre_name(genre_id: int) -> str | None:
    """Look up a genre's display name."""
    return GENRE_NAMES.get(genre_id)
