"""Base error for document store operations."""


class DocumentStoreError(RuntimeError):
    """Raised when DocumentStore operations encounter invalid state."""
