"""Unit tests for the docstore CLI."""

import json
from unittest.mock import patch

import pymongo.errors
from typer.testing import CliRunner

from docstore.api.store._mongomock._client import _get_mongomock_client
from docstore.cli import main
from docstore.cli._create_app import _create_app

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(_create_app(), ["--backend", "mongomock", *args])


def _json_output(result) -> dict:
    lines = result.stdout.splitlines()
    start = next(i for i, line in enumerate(lines) if line.startswith("{"))
    return json.loads("\n".join(lines[start:]))


def test_no_command_shows_help():
    result = runner.invoke(_create_app(), ["--backend", "mongomock"])
    assert result.exit_code == 0
    assert "Usage: " in result.stdout


def test_show_prints_all_documents(database_name):
    _get_mongomock_client()[database_name]["people"].insert_one({"name": "Alice", "age": 30})
    result = _invoke("show", database_name, "people")
    assert result.exit_code == 0
    output = _json_output(result)
    assert output["count"] == 1
    assert output["documents"][0]["name"] == "Alice"
    # ObjectId is rendered as a string
    assert isinstance(output["documents"][0]["_id"], str)


def test_show_exits_nonzero_when_liveness_fails(database_name):
    with patch(
        "docstore.api.store._mongomock._Impl._Impl.ping",
        side_effect=pymongo.errors.ServerSelectionTimeoutError("no servers"),
    ):
        result = _invoke("show", database_name, "people")
    assert result.exit_code == 1
    assert _json_output(result)["errors"] == ["Client failed to connect to server"]


def test_insert_find_update_delete_round(database_name):
    assert _invoke("insert", database_name, "people", '{"name": "Alice", "age": 30}').exit_code == 0

    found = _invoke("find", database_name, "people", "name", "Alice")
    assert found.exit_code == 0
    assert _json_output(found)["document"]["age"] == 30

    updated = _invoke("update", database_name, "people", "name", "Alice", "age", '"31"')
    assert updated.exit_code == 0
    assert _json_output(updated)["update"] == {"age": "31"}
    assert _get_mongomock_client()[database_name]["people"].find_one({"name": "Alice"})["age"] == "31"

    deleted = _invoke("delete", database_name, "people", "age", '"31"')
    assert deleted.exit_code == 0
    assert _json_output(deleted)["deleted_count"] == 1


def test_values_are_parsed_as_json_when_possible(database_name):
    _get_mongomock_client()[database_name]["people"].insert_one({"name": "Bob", "age": 25})
    assert _json_output(_invoke("find", database_name, "people", "age", "25"))["document"]["name"] == "Bob"
    assert _json_output(_invoke("find", database_name, "people", "name", "Bob"))["document"]["age"] == 25


def test_insert_rejects_non_object_document(database_name):
    result = _invoke("insert", database_name, "people", "[1, 2]")
    assert result.exit_code != 0


def test_collections_and_databases(database_name):
    _get_mongomock_client()[database_name]["people"].insert_one({"name": "Alice"})
    collections = _invoke("collections", database_name)
    assert collections.exit_code == 0
    assert _json_output(collections)["collections"] == ["people"]

    databases = _invoke("databases")
    assert databases.exit_code == 0
    assert database_name in _json_output(databases)["databases"]


def test_config_file_is_used(tmp_path, database_name):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"type": "mongomock", "data": {}}))
    result = runner.invoke(_create_app(), ["--config", str(path), "show", database_name, "people"])
    assert result.exit_code == 0
    assert _json_output(result)["count"] == 0


def test_invalid_config_file_exits_2(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{broken")
    result = runner.invoke(_create_app(), ["--config", str(path), "databases"])
    assert result.exit_code == 2


def test_unknown_backend_is_rejected():
    result = runner.invoke(_create_app(), ["--backend", "sqlite", "databases"])
    assert result.exit_code == 1


def test_main_returns_exit_code(database_name):
    assert main(["--backend", "mongomock", "show", database_name, "people"]) == 0
    assert main(["--backend", "mongomock", "show", database_name, " "]) == 1
    assert main(["--backend", "mongomock", "no-such-command"]) == 2


def test_config_file_with_non_object_data_exits_2(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"type": "mongomock", "data": "x"}))
    result = runner.invoke(_create_app(), ["--config", str(path), "databases"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)


def test_find_treats_operator_values_literally(database_name):
    assert _invoke("insert", database_name, "people", '{"name": "Alice", "age": 30}').exit_code == 0
    result = _invoke("find", database_name, "people", "age", '{"$gt": 26}')
    assert result.exit_code == 0
    assert _json_output(result)["document"] is None
