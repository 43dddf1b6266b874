"""Abstract base class for store driver implementations."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class _AbstractImpl(ABC):
    """Capability interface the DocumentStore forwards to.

    Implementations raise the driver's own errors; DocumentStore classifies them.
    """

    @abstractmethod
    def connect(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @abstractmethod
    def collection(self, database_name: str, collection_name: str) -> Any:
        pass

    @abstractmethod
    def ping(self, database_name: str, timeout_ms: int) -> None:
        """Round-trip a ``ping`` command, raising if it does not complete in time."""

    @abstractmethod
    def find(self, collection: Any, filter: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    def find_one(self, collection: Any, filter: dict[str, Any]) -> dict[str, Any] | None:
        pass

    @abstractmethod
    def insert_one(self, collection: Any, document: Mapping[str, Any]) -> None:
        pass

    @abstractmethod
    def update_one(self, collection: Any, filter: dict[str, Any], update: dict[str, Any]) -> tuple[int, int]:
        """Apply the ``update`` document to the first match.

        Returns:
            (matched_count, modified_count)
        """

    @abstractmethod
    def delete_one(self, collection: Any, filter: dict[str, Any]) -> int:
        pass

    @abstractmethod
    def list_databases(self) -> list[str]:
        pass

    @abstractmethod
    def list_collections(self, database_name: str) -> list[str]:
        pass
