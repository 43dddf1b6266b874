"""Exercise the real pymongo backend without a running server."""

import time

import pytest

from docstore.api.store.DocumentStore import DocumentStore
from docstore.api.store.InvalidArgument import InvalidArgument
from docstore.api.store.StoreState import StoreState

# Port 1 is never a MongoDB server; connections are refused.
UNREACHABLE_URI = "mongodb://127.0.0.1:1/?serverSelectionTimeoutMS=5000"


@pytest.mark.timeout(30)
def test_liveness_is_false_when_server_unreachable():
    with DocumentStore.from_uri(UNREACHABLE_URI, liveness_timeout_ms=200) as store:
        started = time.monotonic()
        assert store.check_liveness("admin") is False
        # The probe timeout bounds the wait, not serverSelectionTimeoutMS
        assert time.monotonic() - started < 4.5
        assert store.state is StoreState.DATABASE_SELECTED
    assert store.state is StoreState.CLOSED


def test_construction_does_not_contact_server():
    with DocumentStore.from_uri(UNREACHABLE_URI) as store:
        assert store.state is StoreState.UNSELECTED


def test_malformed_connection_string_fails_at_construction():
    with pytest.raises(InvalidArgument):
        DocumentStore.from_uri("mongodb://")
