"""Mock MongoDB store implementation using mongomock."""

from .._mongo._Impl import _Impl as _MongoImpl
from ..StoreConfig import StoreConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_MongoImpl):
    """In-memory backend; collection operations are inherited from the MongoDB backend."""

    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self.uri = store_config.data.uri
        self._client = None

    def connect(self) -> None:
        self._client = _get_mongomock_client()

    def close(self) -> None:
        # Don't close shared client - it's reused across instances
        self._client = None
