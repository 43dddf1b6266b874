"""DocumentStore public API: a connection-scoped equality facade over a document database."""

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import pymongo.errors
from pydantic import ValidationError

from ._AbstractImpl import _AbstractImpl
from .CollectionNotFound import CollectionNotFound
from .DeleteOutcome import DeleteOutcome
from .Equality import Equality, EqualityLike
from .InvalidArgument import InvalidArgument
from .StoreClosed import StoreClosed
from .StoreCommunicationFailure import StoreCommunicationFailure
from .StoreConfig import _BACKEND_REGISTRY, DEFAULT_LIVENESS_TIMEOUT_MS, StoreConfig
from .StoreState import StoreState
from .UpdateOutcome import UpdateOutcome

logger = logging.getLogger(__name__)


def _load_impl(store_config: StoreConfig) -> _AbstractImpl:
    backend_type = store_config.type
    if backend_type not in _BACKEND_REGISTRY:
        raise InvalidArgument(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

    # Import implementation class directly from backend _Impl module
    module = __import__(f"docstore.api.store._{backend_type}._Impl", fromlist=[""])
    return module._Impl(store_config)


def _require_name(value: str, param: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"Param {param} can't be empty (found: {value!r})")
    return value


class DocumentStore:
    """Public API for selecting a collection and running single-field operations on it.

    Usage follows the selection order::

        with DocumentStore.from_uri("mongodb://localhost:27017") as store:
            if not store.check_liveness("shop"):
                raise SystemExit("Client failed to connect to server")
            store.select_collection("people")
            for document in store.fetch_all():
                print(document)

    Every data operation resolves the selected collection again under a lock, so
    one instance may be shared between threads without mixing up selections.
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self._lock = threading.RLock()
        self._database_name = ""
        self._collection_name = ""
        self._state = StoreState.UNSELECTED
        self._impl = _load_impl(store_config)
        try:
            self._impl.connect()
        except (pymongo.errors.InvalidURI, pymongo.errors.ConfigurationError, ValueError) as exc:
            raise InvalidArgument(f"Invalid connection string: {exc}") from exc
        except pymongo.errors.PyMongoError as exc:
            raise StoreCommunicationFailure("connect", exc) from exc
        logger.info(f"Opened {store_config.type} store client")

    @classmethod
    def from_uri(
        cls,
        uri: str,
        backend: str = "mongo",
        liveness_timeout_ms: int = DEFAULT_LIVENESS_TIMEOUT_MS,
    ) -> "DocumentStore":
        """Construct a store from a bare connection string."""
        _require_name(uri, "uri")
        try:
            store_config = StoreConfig.from_uri(uri, backend=backend, liveness_timeout_ms=liveness_timeout_ms)
        except ValidationError as exc:
            raise InvalidArgument(f"Invalid store configuration: {exc}") from exc
        return cls(store_config)

    def __enter__(self) -> "DocumentStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Release the client handle. Safe to call more than once."""
        with self._lock:
            if self._state is StoreState.CLOSED:
                return
            self._state = StoreState.CLOSED
            self._impl.close()
        logger.info(f"Closed {self.store_config.type} store client")

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def collection_name(self) -> str:
        return self._collection_name

    # ------------------------------------------------------------- Selection
    def check_liveness(self, database_name: str) -> bool:
        """Select ``database_name`` and ping it within the configured timeout.

        Returns:
            True if the ping completed, False on timeout or connection failure.

        Raises:
            InvalidArgument: If ``database_name`` is empty or whitespace.
        """
        _require_name(database_name, "database_name")
        timeout_ms = self.store_config.liveness_timeout_ms
        with self._lock:
            self._require_open()
            self._database_name = database_name
            self._collection_name = ""
            self._state = StoreState.DATABASE_SELECTED
            try:
                self._impl.ping(database_name, timeout_ms)
            except pymongo.errors.PyMongoError as exc:
                logger.warning(f"Liveness probe for {database_name!r} failed within {timeout_ms}ms: {exc}")
                return False
        logger.debug(f"Liveness probe for {database_name!r} succeeded")
        return True

    def select_collection(self, collection_name: str) -> Any:
        """Resolve and select ``collection_name`` in the selected database.

        Raises:
            InvalidArgument: If no database is selected or the name is empty.
            CollectionNotFound: If the resolved handle reports a different name.
        """
        with self._lock:
            self._require_open()
            if self._state is StoreState.UNSELECTED:
                raise InvalidArgument("Param database_name can't be empty; call check_liveness first")
            _require_name(collection_name, "collection_name")
            collection = self._resolve(collection_name)
            self._collection_name = collection_name
            self._state = StoreState.COLLECTION_SELECTED
        logger.debug(f"Selected collection {self._database_name}.{collection_name}")
        return collection

    # ------------------------------------------------------------ Operations
    def fetch_all(self) -> list[dict[str, Any]]:
        """Return every document in the selected collection."""
        with self._selected_collection() as collection, self._driver_errors("fetch_all"):
            return self._impl.find(collection)

    def insert(self, document: Mapping[str, Any]) -> Mapping[str, Any]:
        """Insert ``document`` and return that same object.

        The driver gets a copy, so a generated ``_id`` is not written back into
        the caller's mapping.
        """
        with self._selected_collection() as collection, self._driver_errors("insert"):
            self._impl.insert_one(collection, dict(document))
        return document

    def search_by_equality(self, filter: EqualityLike) -> dict[str, Any] | None:
        """Return the first document where the filter field equals its value, else None."""
        equality = Equality.coerce(filter, "filter")
        with self._selected_collection() as collection, self._driver_errors("search_by_equality"):
            return self._impl.find_one(collection, equality.as_filter())

    def update_by_equality(self, filter: EqualityLike, update: EqualityLike) -> UpdateOutcome:
        """``$set`` the update pair on the first document matching the filter pair."""
        match = Equality.coerce(filter, "filter")
        change = Equality.coerce(update, "update")
        with self._selected_collection() as collection, self._driver_errors("update_by_equality"):
            matched, modified = self._impl.update_one(collection, match.as_filter(), change.as_set())
        return UpdateOutcome(change.field, change.value, matched_count=matched, modified_count=modified)

    def delete_by_equality(self, filter: EqualityLike) -> DeleteOutcome:
        """Delete the first document matching the filter pair."""
        equality = Equality.coerce(filter, "filter")
        with self._selected_collection() as collection, self._driver_errors("delete_by_equality"):
            return DeleteOutcome(self._impl.delete_one(collection, equality.as_filter()))

    def database_names(self) -> list[str]:
        with self._lock:
            self._require_open()
            with self._driver_errors("list_database_names"):
                return self._impl.list_databases()

    def collection_names(self, database_name: str) -> list[str]:
        _require_name(database_name, "database_name")
        with self._lock:
            self._require_open()
            with self._driver_errors("list_collection_names"):
                return self._impl.list_collections(database_name)

    def list_database_names(self) -> str:
        """Database names joined with ``", "``."""
        return ", ".join(self.database_names())

    def list_collection_names(self, database_name: str) -> str:
        """Collection names of ``database_name`` joined with ``","``."""
        return ",".join(self.collection_names(database_name))

    # --------------------------------------------------------------- Helpers
    def _require_open(self) -> None:
        if self._state is StoreState.CLOSED:
            raise StoreClosed("Store is closed")

    def _resolve(self, collection_name: str) -> Any:
        with self._driver_errors("select_collection"):
            collection = self._impl.collection(self._database_name, collection_name)
        if collection.name != collection_name:
            raise CollectionNotFound(self._database_name, collection_name)
        return collection

    @contextmanager
    def _selected_collection(self) -> Iterator[Any]:
        with self._lock:
            self._require_open()
            if self._state is not StoreState.COLLECTION_SELECTED:
                raise CollectionNotFound(self._database_name)
            yield self._resolve(self._collection_name)

    @contextmanager
    def _driver_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except pymongo.errors.PyMongoError as exc:
            logger.error(f"Store operation {operation} failed: {exc}")
            raise StoreCommunicationFailure(operation, exc) from exc
        logger.debug(f"Store operation {operation} completed on {self._database_name}.{self._collection_name}")
