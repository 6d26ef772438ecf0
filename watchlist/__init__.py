"""
Movie Watchlist client package.

This package contains the list/search/sort pipeline, the form and list
controllers, the remote movie service and image upload clients, and the
Streamlit UI built on top of them.
"""

__version__ = "1.0.0"
