"""
Media Host Factory
==================

Factory pattern for creating media host instances based on configuration.
"""

import logging
from typing import Literal

from django.conf import settings

from .cloudinary_adapter import CloudinaryMediaHost
from .interface import MediaHostInterface
from .mock_adapter import MockMediaHost

logger = logging.getLogger(__name__)

MediaBackend = Literal["cloudinary", "mock"]


class MediaHostFactory:
    """
    Factory for creating media host instances.

    Usage:
        # In settings.py
        INFRASTRUCTURE = {"MEDIA_BACKEND": "cloudinary"}  # or 'mock' for testing

        # In your code
        media_host = MediaHostFactory.create()
    """

    @staticmethod
    def create(backend: MediaBackend | None = None) -> MediaHostInterface:
        """
        Create a media host instance.

        Args:
            backend: 'cloudinary' or 'mock'. If None, reads INFRASTRUCTURE["MEDIA_BACKEND"]

        Returns:
            MediaHostInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("MEDIA_BACKEND", "cloudinary")

        logger.info(f"Creating media host backend: {backend_type}")

        if backend_type == "cloudinary":
            return CloudinaryMediaHost()
        elif backend_type == "mock":
            return MockMediaHost()
        else:
            raise ValueError(f"Invalid media backend: {backend_type}. Must be 'cloudinary' or 'mock'")
