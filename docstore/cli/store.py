"""Store commands: show, databases, collections, find, insert, update, delete."""

import json
from typing import Any

import typer

from docstore.api.store.cmd_delete import cmd_delete
from docstore.api.store.cmd_find import cmd_find
from docstore.api.store.cmd_insert import cmd_insert
from docstore.api.store.cmd_list import cmd_list
from docstore.api.store.cmd_show import cmd_show
from docstore.api.store.cmd_update import cmd_update
from docstore.api.store.StoreConfig import StoreConfig
from docstore.cli._handle_stage_result import handle_stage_result

_DATABASE_HELP = "Database name"
_COLLECTION_HELP = "Collection name"


def _store_config(ctx: typer.Context) -> StoreConfig:
    return ctx.obj["store_config"]


def _parse_value(text: str) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def show_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
    collection: str = typer.Argument(..., help=_COLLECTION_HELP),
) -> None:
    """Check the connection, select a collection and print all its documents."""
    handle_stage_result(cmd_show)(_store_config(ctx), database, collection)


def databases_command(ctx: typer.Context) -> None:
    """List database names."""
    handle_stage_result(cmd_list)(_store_config(ctx))


def collections_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
) -> None:
    """List collection names of a database."""
    handle_stage_result(cmd_list)(_store_config(ctx), database)


def find_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
    collection: str = typer.Argument(..., help=_COLLECTION_HELP),
    field: str = typer.Argument(..., help="Field to match"),
    value: str = typer.Argument(..., help="Value to match (JSON, or plain string)"),
) -> None:
    """Print the first document where FIELD equals VALUE."""
    handle_stage_result(cmd_find)(_store_config(ctx), database, collection, field, _parse_value(value))


def insert_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
    collection: str = typer.Argument(..., help=_COLLECTION_HELP),
    document: str = typer.Argument(..., help='Document as a JSON object, e.g. \'{"name": "Alice"}\''),
) -> None:
    """Insert one document."""
    parsed = _parse_value(document)
    if not isinstance(parsed, dict):
        raise typer.BadParameter("document must be a JSON object", param_hint="DOCUMENT")
    handle_stage_result(cmd_insert)(_store_config(ctx), database, collection, parsed)


def update_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
    collection: str = typer.Argument(..., help=_COLLECTION_HELP),
    field: str = typer.Argument(..., help="Field to match"),
    value: str = typer.Argument(..., help="Value to match (JSON, or plain string)"),
    set_field: str = typer.Argument(..., help="Field to set"),
    set_value: str = typer.Argument(..., help="New value (JSON, or plain string)"),
) -> None:
    """Set SET_FIELD to SET_VALUE on the first document where FIELD equals VALUE."""
    handle_stage_result(cmd_update)(
        _store_config(ctx),
        database,
        collection,
        (field, _parse_value(value)),
        (set_field, _parse_value(set_value)),
    )


def delete_command(
    ctx: typer.Context,
    database: str = typer.Argument(..., help=_DATABASE_HELP),
    collection: str = typer.Argument(..., help=_COLLECTION_HELP),
    field: str = typer.Argument(..., help="Field to match"),
    value: str = typer.Argument(..., help="Value to match (JSON, or plain string)"),
) -> None:
    """Delete the first document where FIELD equals VALUE."""
    handle_stage_result(cmd_delete)(_store_config(ctx), database, collection, field, _parse_value(value))


def register_store_commands(app: typer.Typer) -> None:
    app.command(name="show")(show_command)
    app.command(name="databases")(databases_command)
    app.command(name="collections")(collections_command)
    app.command(name="find")(find_command)
    app.command(name="insert")(insert_command)
    app.command(name="update")(update_command)
    app.command(name="delete")(delete_command)
