"""Shared pytest configuration and fixtures for all tests."""

import uuid

import pytest

from docstore.api.store.DocumentStore import DocumentStore
from docstore.api.store.StoreConfig import StoreConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests against the in-memory backend")
    config.addinivalue_line("markers", "integration: tests that exercise the real pymongo driver")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def mongomock_config_dict() -> dict:
    """Minimal valid store configuration dict using the in-memory backend."""
    return {
        "type": "mongomock",
        "liveness_timeout_ms": 1000,
        "data": {},
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(**mongomock_config_dict())


@pytest.fixture
def database_name() -> str:
    # mongomock's client is shared in-process; a unique name keeps tests isolated.
    return f"docstore_test_{uuid.uuid4().hex[:12]}"


@pytest.fixture
def store(store_config: StoreConfig):
    with DocumentStore(store_config) as document_store:
        yield document_store


@pytest.fixture
def people(store: DocumentStore, database_name: str) -> DocumentStore:
    """Store with ``people`` selected and holding Alice and Bob."""
    assert store.check_liveness(database_name) is True
    collection = store.select_collection("people")
    collection.insert_many([{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}])
    return store


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    """Expose ``run_cmd`` to tests without importing conftest."""
    return run_cmd
