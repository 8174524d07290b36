"""
Application configuration loaded from environment or defaults.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def get_api_key() -> str | None:
    """Get TMDB API key from env. Returns None when unset or blank."""
    return os.getenv("TMDB_API_KEY", "").strip() or None


def get_api_base_url() -> str:
    """Get TMDB API base URL from env or default."""
    return os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3").rstrip("/")


def get_image_base_url() -> str:
    """Get image CDN base URL from env or default."""
    return os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p").rstrip("/")


def get_poster_size() -> str:
    """Get poster width variant (e.g. w500)."""
    return os.getenv("TMDB_POSTER_SIZE", "w500")


def get_language() -> str:
    """Get language sent with list endpoints."""
    return os.getenv("TMDB_LANGUAGE", "en-US")


def get_request_timeout() -> float:
    """Get HTTP timeout in seconds. Invalid or non-positive values fall back to the default."""
    raw = os.getenv("TMDB_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid TMDB_TIMEOUT=%r; using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if not timeout > 0:
        logger.warning("Ignoring non-positive TMDB_TIMEOUT=%r; using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
