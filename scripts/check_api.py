"""Quick check that the movie service is reachable and returns data."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from watchlist.core.errors import WatchlistError
from watchlist.ui.utils.api_client import build_movie_service
from watchlist.utils.logging_config import setup_logging

setup_logging(level="INFO")

client = build_movie_service()
print("Base URL:", client.base_url)
try:
    genres = client.get_genres()
    movies = client.list_movies()
except WatchlistError as e:
    print("Movie service not available:", e)
    sys.exit(1)
print("Genres:", ", ".join(genres) or "-")
print("Movies:", len(movies))
