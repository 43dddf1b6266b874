"""Closed store error."""

from .DocumentStoreError import DocumentStoreError


class StoreClosed(DocumentStoreError):
    """Raised when an operation is attempted after the store was closed."""
