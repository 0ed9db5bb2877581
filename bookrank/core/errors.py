"""
Exception types raised by the service
"""


class BookRankError(Exception):
    """Base class for service errors"""


class IngestionError(BookRankError):
    """
    An uploaded file could not be read as a whole.

    Raised for stream-level problems (unreadable or undecodable input,
    missing header columns). Problems with a single row never raise; they
    are recorded on the ingestion report instead.
    """
