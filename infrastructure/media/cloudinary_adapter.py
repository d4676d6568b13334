"""
Cloudinary Media Host
=====================

Concrete implementation of MediaHostInterface on top of the Cloudinary SDK.
"""

import logging
import socket
from typing import Any, Dict, Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import urllib3.exceptions
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .exceptions import UploadError
from .interface import ImageReference, MediaHostInterface

logger = logging.getLogger(__name__)


class CloudinaryMediaHost(MediaHostInterface):
    """
    Cloudinary image host.

    Configuration (in settings.py):
        CLOUDINARY["CLOUD_NAME"]: Cloudinary cloud name
        CLOUDINARY["API_KEY"]: API key
        CLOUDINARY["API_SECRET"]: API secret used to sign uploads
        CLOUDINARY["FOLDER"]: Folder uploaded images land in (optional)
        CLOUDINARY["UPLOAD_TIMEOUT"]: Seconds before an upload is abandoned
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = config if config is not None else getattr(settings, "CLOUDINARY", {})

        cloud_name = config.get("CLOUD_NAME", "")
        api_key = config.get("API_KEY", "")
        api_secret = config.get("API_SECRET", "")
        self.folder = config.get("FOLDER", "")
        self.timeout = float(config.get("UPLOAD_TIMEOUT", 30))

        missing = [
            name
            for name, value in (("CLOUD_NAME", cloud_name), ("API_KEY", api_key), ("API_SECRET", api_secret))
            if not value
        ]
        if missing:
            raise ImproperlyConfigured(f"Cloudinary is missing configuration: {', '.join(missing)}")

        cloudinary.config(cloud_name=cloud_name, api_key=api_key, api_secret=api_secret, secure=True)
        self.cloud_name = cloud_name

    def upload(self, data_uri: str) -> ImageReference:
        """
        Upload a ``data:`` URI to Cloudinary.

        Args:
            data_uri: Encoded image payload

        Returns:
            ImageReference built from Cloudinary's response

        Raises:
            UploadError: On network failure, timeout, rejection or malformed response
        """
        options: Dict[str, Any] = {"timeout": self.timeout}
        if self.folder:
            options["folder"] = self.folder

        try:
            result = cloudinary.uploader.upload(data_uri, **options)
        except cloudinary.exceptions.Error as e:
            # The SDK re-raises transport failures as Error; the original stays in __context__
            if isinstance(e.__context__, (urllib3.exceptions.TimeoutError, socket.timeout)):
                logger.error(f"Cloudinary upload timed out after {self.timeout}s")
                raise UploadError(f"Image upload timed out after {self.timeout:g}s") from e
            logger.error(f"Cloudinary rejected upload: {e}")
            raise UploadError(f"Image upload failed: {e}") from e
        except (urllib3.exceptions.HTTPError, OSError) as e:
            logger.error(f"Network error uploading image to Cloudinary: {e}")
            raise UploadError(f"Image upload failed: {e}") from e

        if not isinstance(result, dict) or not (result.get("secure_url") or result.get("url")):
            logger.error("Cloudinary response did not contain an image URL")
            raise UploadError("Image upload returned an invalid response")

        url = result.get("url") or result["secure_url"]
        reference = ImageReference(
            url=url,
            secure_url=result.get("secure_url") or url,
            public_id=result.get("public_id", ""),
            raw=dict(result),
        )
        logger.info(f"Uploaded image to Cloudinary: {reference.public_id}")
        return reference
