"""
Pydantic schemas for TMDB records and the genre table.
"""

from cinenita.models.genre import Genre, GENRES, GENRE_NAMES, genre_name, is_known_genre
from cinenita.models.movie import Movie, MoviePage, PLACEHOLDER_POSTER, parse_movie_page

__all__ = [
    "Genre",
    "GENRES",
    "GENRE_NAMES",
    "genre_name",
    "is_known_genre",
    "Movie",
    "MoviePage",
    "PLACEHOLDER_POSTER",
    "parse_movie_page",
]
