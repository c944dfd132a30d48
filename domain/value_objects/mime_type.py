from enum import Enum


class MimeType(str, Enum):
    """Represent MIME types attached to fetched complex data."""

    OCTET_STREAM = "application/octet-stream"
