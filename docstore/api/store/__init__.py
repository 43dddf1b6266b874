"""Document store facade over a MongoDB-compatible database."""

from .CollectionNotFound import CollectionNotFound
from .DeleteOutcome import DeleteOutcome
from .DocumentStore import DocumentStore
from .DocumentStoreError import DocumentStoreError
from .Equality import Equality
from ._output_models import (
    StoreCollectionsOutput,
    StoreDatabasesOutput,
    StoreDeleteOutput,
    StoreFindOutput,
    StoreInsertOutput,
    StoreShowOutput,
    StoreUpdateOutput,
)
from .InvalidArgument import InvalidArgument
from .StoreClosed import StoreClosed
from .StoreCommunicationFailure import StoreCommunicationFailure
from .StoreConfig import StoreConfig
from .StoreState import StoreState
from .UpdateOutcome import UpdateOutcome

__all__ = [
    "CollectionNotFound",
    "DeleteOutcome",
    "DocumentStore",
    "DocumentStoreError",
    "Equality",
    "InvalidArgument",
    "StoreClosed",
    "StoreCollectionsOutput",
    "StoreCommunicationFailure",
    "StoreConfig",
    "StoreDatabasesOutput",
    "StoreDeleteOutput",
    "StoreFindOutput",
    "StoreInsertOutput",
    "StoreShowOutput",
    "StoreState",
    "StoreUpdateOutput",
    "UpdateOutcome",
]
