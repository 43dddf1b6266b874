"""Output models for the store commands."""

from typing import Any

from pydantic import BaseModel, Field


class _StoreOutput(BaseModel):
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class _CollectionOutput(_StoreOutput):
    database: str
    collection: str


class StoreShowOutput(_CollectionOutput):
    count: int
    documents: list[dict[str, Any]]


class StoreDatabasesOutput(_StoreOutput):
    databases: list[str]


class StoreCollectionsOutput(_StoreOutput):
    database: str
    collections: list[str]


class StoreFindOutput(_CollectionOutput):
    filter: dict[str, Any]
    document: dict[str, Any] | None


class StoreInsertOutput(_CollectionOutput):
    document: dict[str, Any] | None


class StoreUpdateOutput(_CollectionOutput):
    filter: dict[str, Any]
    update: dict[str, Any]
    matched_count: int = 0
    modified_count: int = 0


class StoreDeleteOutput(_CollectionOutput):
    filter: dict[str, Any]
    deleted_count: int = 0
