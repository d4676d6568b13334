"""
Mock Media Host
===============

In-memory implementation of MediaHostInterface for tests and local development.
"""

import logging
import uuid
from typing import List, Optional

from .exceptions import UploadError
from .interface import ImageReference, MediaHostInterface

logger = logging.getLogger(__name__)


class MockMediaHost(MediaHostInterface):
    """
    Mock media host.

    Instead of uploading, this host:
        - Records every data URI it receives
        - Returns a fake reference under ``BASE_URL``
        - Raises UploadError while ``fail_with`` is set
    """

    BASE_URL = "https://media.example.test"

    def __init__(self):
        self.uploads: List[str] = []
        self.fail_with: Optional[str] = None

    def upload(self, data_uri: str) -> ImageReference:
        if self.fail_with:
            logger.info(f"[MOCK MEDIA] Failing upload: {self.fail_with}")
            raise UploadError(self.fail_with)

        self.uploads.append(data_uri)
        public_id = f"offers/{uuid.uuid4().hex}"
        url = f"{self.BASE_URL}/{public_id}"
        logger.info(f"[MOCK MEDIA] Stored image {public_id} ({len(data_uri)} chars)")

        return ImageReference(
            url=url,
            secure_url=url,
            public_id=public_id,
            raw={"resource_type": "image", "bytes": len(data_uri)},
        )

    def clear(self):
        self.uploads.clear()
        self.fail_with = None
