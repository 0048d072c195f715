"""Exceptions raised by the ingestion components."""

from typing import Optional


class BlobtrackError(Exception):
    """Base class for every error raised by blobtrack."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DatabaseConnectionError(BlobtrackError):
    """The database could not be reached at startup."""


class SchemaError(BlobtrackError):
    """The blobs table could not be created."""


class FetchError(BlobtrackError):
    """The API call failed or returned a body that is not a list of blobs.

    ``status_code`` and ``reason`` are set when the server answered with a
    non-200 status; they stay ``None`` for transport and decoding failures.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class PersistError(BlobtrackError):
    """A blob could not be written to the database."""
