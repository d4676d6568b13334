"""Encoding of uploaded files into self-describing ``data:`` URIs."""

import base64
import re
from typing import Optional

from .exceptions import EncodingError

IMAGE_MIME_PATTERN = re.compile(r"^image/[a-z0-9][a-z0-9.+-]*$")


def encode_data_uri(file_bytes: bytes, mime_type: str, max_bytes: Optional[int] = None) -> str:
    """Return ``data:<mime_type>;base64,<payload>`` for an image upload."""
    if not isinstance(file_bytes, (bytes, bytearray)):
        raise EncodingError("Uploaded file content must be bytes")
    if not file_bytes:
        raise EncodingError("Uploaded file is empty")
    if max_bytes is not None and len(file_bytes) > max_bytes:
        raise EncodingError(f"Uploaded file exceeds {max_bytes} bytes")

    mime_type = (mime_type or "").strip().lower()
    if not IMAGE_MIME_PATTERN.match(mime_type):
        raise EncodingError(f"Unsupported media type: {mime_type or 'unknown'}")

    encoded = base64.b64encode(bytes(file_bytes)).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
