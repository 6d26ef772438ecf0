"""
Clients for the external services: the movie REST API and the image host.
"""

from watchlist.services.movie_service import MovieServiceClient
from watchlist.services.image_upload import CloudinaryUploader, ImageFile

__all__ = ['MovieServiceClient', 'CloudinaryUploader', 'ImageFile']
