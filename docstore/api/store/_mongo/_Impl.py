"""MongoDB store implementation."""

from collections.abc import Mapping
from typing import Any

import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ._Data import _Data as _StoreConfigData


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _StoreConfigData):
            raise ValueError("MongoDB config data is required")
        self.uri = store_config.data.uri
        self._client: MongoClient[Any] | None = None

    def connect(self) -> None:
        # MongoClient connects in the background; only URI parsing happens here.
        self._client = MongoClient(self.uri)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _require_client(self) -> MongoClient[Any]:
        if self._client is None:
            raise RuntimeError("Mongo client not initialized")
        return self._client

    def collection(self, database_name: str, collection_name: str) -> Collection:
        return self._require_client()[database_name][collection_name]

    def ping(self, database_name: str, timeout_ms: int) -> None:
        with pymongo.timeout(timeout_ms / 1000):
            self._require_client()[database_name].command("ping")

    def find(self, collection: Collection, filter: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return list(collection.find(filter or {}))

    def find_one(self, collection: Collection, filter: dict[str, Any]) -> dict[str, Any] | None:
        return collection.find_one(filter)

    def insert_one(self, collection: Collection, document: Mapping[str, Any]) -> None:
        collection.insert_one(document)

    def update_one(self, collection: Collection, filter: dict[str, Any], update: dict[str, Any]) -> tuple[int, int]:
        result = collection.update_one(filter, update)
        return result.matched_count, result.modified_count

    def delete_one(self, collection: Collection, filter: dict[str, Any]) -> int:
        return collection.delete_one(filter).deleted_count

    def list_databases(self) -> list[str]:
        return self._require_client().list_database_names()

    def list_collections(self, database_name: str) -> list[str]:
        return self._require_client()[database_name].list_collection_names()
