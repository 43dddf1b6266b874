"""Open a store and walk it to the selected-collection state."""

from collections.abc import Iterator
from contextlib import contextmanager

from .DocumentStore import DocumentStore
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig

CONNECT_FAILED = "Client failed to connect to server"


@contextmanager
def _open_database(store_config: StoreConfig, database: str) -> Iterator[DocumentStore]:
    with DocumentStore(store_config) as store:
        if not store.check_liveness(database):
            raise DocumentStoreError(CONNECT_FAILED)
        yield store


@contextmanager
def _open_collection(store_config: StoreConfig, database: str, collection: str) -> Iterator[DocumentStore]:
    """Yield a store that passed the liveness probe and has ``collection`` selected."""
    with _open_database(store_config, database) as store:
        store.select_collection(collection)
        yield store
