"""Store communication failure."""

from .DocumentStoreError import DocumentStoreError


class StoreCommunicationFailure(DocumentStoreError):
    """Raised when the driver reports a transport or protocol error.

    The driver exception is kept as ``__cause__`` and on ``original_error``.
    """

    def __init__(self, operation: str, original_error: Exception):
        super().__init__(f"{operation} failed: {original_error}")
        self.operation = operation
        self.original_error = original_error
