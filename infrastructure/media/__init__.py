"""
Media Host Abstraction Layer
============================

Provides a unified interface for hosting uploaded offer images.
"""

from .cloudinary_adapter import CloudinaryMediaHost
from .encoding import encode_data_uri
from .exceptions import EncodingError, MediaHostException, UploadError
from .factory import MediaHostFactory
from .interface import ImageReference, MediaHostInterface
from .mock_adapter import MockMediaHost

__all__ = [
    "MediaHostInterface",
    "ImageReference",
    "MediaHostException",
    "UploadError",
    "EncodingError",
    "encode_data_uri",
    "CloudinaryMediaHost",
    "MockMediaHost",
    "MediaHostFactory",
]
