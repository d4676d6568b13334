class MediaHostException(Exception):
    """Base exception for image ingestion."""

    pass


class UploadError(MediaHostException):
    """The media host could not be reached, timed out, or rejected the upload."""

    pass


class EncodingError(MediaHostException):
    """The uploaded payload could not be turned into a data URI."""

    pass
