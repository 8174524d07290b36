"""
CineNita movie discovery application package.

This package contains the query/result state machine, the TMDB models,
the Streamlit user interface, and shared utilities.
"""

__version__ = "1.0.0"
