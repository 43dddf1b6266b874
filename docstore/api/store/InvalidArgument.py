"""Invalid argument error."""

from .DocumentStoreError import DocumentStoreError


class InvalidArgument(DocumentStoreError, ValueError):
    """Raised before any store call when a required argument is empty or malformed."""
