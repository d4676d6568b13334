"""
Media Host Interface
====================

Abstract contract for handing uploaded images to an external media host and
getting back a durable reference to the hosted copy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .encoding import encode_data_uri


@dataclass
class ImageReference:
    """
    Pointer to an image stored by the media host.

    Attributes:
        url: Retrieval URL returned by the host
        public_id: Provider-assigned identifier
        secure_url: HTTPS retrieval URL (falls back to ``url``)
        raw: Full provider payload, kept so nothing the host returned is lost
    """

    url: str
    public_id: str
    secure_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.raw)
        data.update(
            {
                "url": self.url,
                "secure_url": self.secure_url or self.url,
                "public_id": self.public_id,
            }
        )
        return data


class MediaHostInterface(ABC):
    """
    Abstract interface for image hosting.

    Concrete implementations:
        - CloudinaryMediaHost: Cloudinary REST upload API
        - MockMediaHost: In-memory host for testing
    """

    def ingest(self, file_bytes: bytes, mime_type: str, max_bytes: Optional[int] = None) -> ImageReference:
        """
        Encode raw bytes as a data URI and upload them.

        Args:
            file_bytes: Uploaded file content
            mime_type: Declared MIME type of the upload
            max_bytes: Optional size ceiling for the payload

        Returns:
            ImageReference for the hosted image

        Raises:
            EncodingError: If the payload cannot be encoded
            UploadError: If the host rejects or fails the upload
        """
        data_uri = encode_data_uri(file_bytes, mime_type, max_bytes=max_bytes)
        return self.upload(data_uri)

    @abstractmethod
    def upload(self, data_uri: str) -> ImageReference:
        """
        Submit an already encoded ``data:`` URI to the host.

        Raises:
            UploadError: If the upload fails for any reason
        """
        pass
