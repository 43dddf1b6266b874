"""Create the main Typer CLI app."""

import logging
from pathlib import Path

import typer

from docstore.api.store.StoreConfig import DEFAULT_LIVENESS_TIMEOUT_MS, StoreConfig
from docstore.cli.store import register_store_commands
from docstore.constants import BACKEND_CHOICES, DEFAULT_URI
from docstore.error_messages import invalid_configuration_error
from docstore.logging_config import setup_logging


def _resolve_store_config(uri: str | None, backend: str, config_path: Path | None, timeout_ms: int) -> StoreConfig:
    """Build the StoreConfig from --config, or from --uri/--backend/--timeout-ms."""
    try:
        if config_path is not None:
            return StoreConfig.load(config_path)
        if uri is None and backend == "mongo":
            uri = DEFAULT_URI
        return StoreConfig(type=backend, liveness_timeout_ms=timeout_ms, data={"uri": uri} if uri else {})
    except ValueError as e:
        invalid_configuration_error(str(config_path) if config_path else "--uri/--backend", e)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Single-field equality operations on a MongoDB collection",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        uri: str | None = typer.Option(None, "--uri", "-u", help=f"Connection string (default: {DEFAULT_URI})"),
        backend: str = typer.Option("mongo", "--backend", "-b", help=f"Store backend: {' or '.join(BACKEND_CHOICES)}"),
        config: Path | None = typer.Option(None, "--config", "-c", help="JSON store config file (overrides --uri)"),
        timeout_ms: int = typer.Option(
            DEFAULT_LIVENESS_TIMEOUT_MS, "--timeout-ms", help="Liveness probe timeout in milliseconds"
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    ) -> None:
        if backend not in BACKEND_CHOICES:
            typer.echo(f"Error: --backend must be one of {', '.join(BACKEND_CHOICES)}, got '{backend}'", err=True)
            raise typer.Exit(1)

        setup_logging(logging.DEBUG if verbose else logging.WARNING)

        ctx.ensure_object(dict)
        ctx.obj["store_config"] = _resolve_store_config(uri, backend, config, timeout_ms)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    register_store_commands(app)
    return app
