"""Errors raised by the order services.

Routes translate these into ``HTTPException`` responses; nothing below the
route layer knows about HTTP status codes.
"""


class BookstoreError(Exception):
    """Base class for bookstore service errors."""


class InvalidParameter(BookstoreError):
    """A field of the submitted customer form or cart failed validation."""


class ResourceNotFound(BookstoreError):
    """A lookup by identifier found no row."""


class PersistenceFailure(BookstoreError):
    """The storage layer failed and the call cannot recover."""


class TransactionAborted(BookstoreError):
    """A write inside the order transaction failed and was rolled back."""
