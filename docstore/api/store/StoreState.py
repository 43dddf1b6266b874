"""Selection state of a DocumentStore."""

from enum import Enum


class StoreState(str, Enum):
    UNSELECTED = "unselected"
    DATABASE_SELECTED = "database_selected"
    COLLECTION_SELECTED = "collection_selected"
    CLOSED = "closed"
