"""
Client configuration loaded from environment or defaults.
"""

import os

DEFAULT_API_URL = "https://pe-prn232-be.onrender.com"


def get_api_base_url() -> str:
    """Get movie service base URL from env or default."""
    return os.getenv("MOVIE_API_URL", DEFAULT_API_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get HTTP timeout in seconds for movie service calls."""
    return float(os.getenv("REQUEST_TIMEOUT", "10"))


def get_upload_timeout() -> float:
    """Get HTTP timeout in seconds for image uploads."""
    return float(os.getenv("UPLOAD_TIMEOUT", "30"))


def get_cloudinary_cloud_name() -> str:
    """Get Cloudinary cloud name. Empty means uploads are not configured."""
    return os.getenv("CLOUDINARY_CLOUD_NAME", "")


def get_cloudinary_upload_preset() -> str:
    """Get Cloudinary unsigned upload preset."""
    return os.getenv("CLOUDINARY_UPLOAD_PRESET", "")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env. None logs to console only."""
    return os.getenv("LOG_FILE") or None
