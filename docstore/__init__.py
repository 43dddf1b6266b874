"""docstore - a single-field equality facade over a MongoDB-compatible document store."""

from .api.store import (
    CollectionNotFound,
    DeleteOutcome,
    DocumentStore,
    DocumentStoreError,
    Equality,
    InvalidArgument,
    StoreClosed,
    StoreCommunicationFailure,
    StoreConfig,
    StoreState,
    UpdateOutcome,
)

__all__ = [
    "CollectionNotFound",
    "DeleteOutcome",
    "DocumentStore",
    "DocumentStoreError",
    "Equality",
    "InvalidArgument",
    "StoreClosed",
    "StoreCommunicationFailure",
    "StoreConfig",
    "StoreState",
    "UpdateOutcome",
]
