"""
Poster upload to Cloudinary using an unsigned upload preset.
"""

import logging
import mimetypes
from dataclasses import dataclass
from typing import Any, Optional

import requests

from watchlist.core.errors import UploadError

logger = logging.getLogger(__name__)

CLOUDINARY_UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"


@dataclass(frozen=True)
class ImageFile:
    """An image picked in the form, held in memory until upload."""

    name: str
    content: bytes
    content_type: str = ""

    def __post_init__(self):
        if not self.content_type:
            guessed, _ = mimetypes.guess_type(self.name)
            object.__setattr__(self, "content_type", guessed or "application/octet-stream")

    @classmethod
    def from_uploaded_file(cls, uploaded: Any) -> "ImageFile":
        """Build from a Streamlit UploadedFile."""
        return cls(name=uploaded.name, content=uploaded.getvalue(), content_type=uploaded.type or "")


class CloudinaryUploader:
    """
    Uploads one image and returns its public HTTPS URL.

    Every failure (missing configuration, non-image file, transport error,
    error status, response without a URL) is reported as UploadError.
    """

    def __init__(
        self,
        cloud_name: str,
        upload_preset: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.upload_preset)

    def upload(self, image: ImageFile) -> str:
        """
        Upload an image.

        Args:
            image: Image to upload

        Returns:
            Public URL of the uploaded image

        Raises:
            UploadError: On any failure
        """
        if not self.configured:
            raise UploadError("Image upload is not configured (set CLOUDINARY_CLOUD_NAME and CLOUDINARY_UPLOAD_PRESET)")
        if not image.content_type.startswith("image/"):
            raise UploadError(f"{image.name} is not an image ({image.content_type})")

        url = CLOUDINARY_UPLOAD_URL.format(cloud_name=self.cloud_name)
        logger.info(f"Uploading {image.name} ({len(image.content)} bytes)")
        try:
            r = self.session.post(
                url,
                files={"file": (image.name, image.content, image.content_type)},
                data={"upload_preset": self.upload_preset},
                timeout=self.timeout,
            )
            r.raise_for_status()
            body = r.json()
        except (requests.RequestException, ValueError) as e:
            raise UploadError(f"Failed to upload image: {e}") from e

        secure_url = body.get("secure_url") if isinstance(body, dict) else None
        if not secure_url:
            raise UploadError("Failed to upload image: no URL in response")
        return secure_url
