"""
Service client factories for the Streamlit UI.

Clients are plain values built from configuration and stored per session;
controllers receive them as constructor arguments.
"""

from watchlist.config import (
    get_api_base_url,
    get_cloudinary_cloud_name,
    get_cloudinary_upload_preset,
    get_request_timeout,
    get_upload_timeout,
)
from watchlist.services.image_upload import CloudinaryUploader
from watchlist.services.movie_service import MovieServiceClient


def build_movie_service() -> MovieServiceClient:
    """Create a movie service client from env settings."""
    return MovieServiceClient(get_api_base_url(), timeout=get_request_timeout())


def build_image_uploader() -> CloudinaryUploader:
    """Create an image uploader from env settings."""
    return CloudinaryUploader(
        get_cloudinary_cloud_name(),
        get_cloudinary_upload_preset(),
        timeout=get_upload_timeout(),
    )
