"""Collection not found error."""

from .DocumentStoreError import DocumentStoreError


class CollectionNotFound(DocumentStoreError):
    """Raised when no collection is selected or the resolved handle does not match."""

    def __init__(self, database_name: str, collection_name: str = ""):
        message = f"Collection not found in database {database_name or '?'}"
        if collection_name:
            message = f"Collection {collection_name!r} not found in database {database_name or '?'}"
        super().__init__(message)
        self.database_name = database_name
        self.collection_name = collection_name
