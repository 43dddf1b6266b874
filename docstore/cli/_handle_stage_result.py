"""Decorator to handle StageResult for CLI display."""

import functools
import json
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

import typer
from rich.console import Console

from docstore.api.StageResult import StageResult

F = TypeVar("F", bound=Callable[..., StageResult])

_stderr_console = Console(file=sys.stderr)


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def handle_stage_result(func: F) -> Callable[..., None]:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON)

    Exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> None:
        result = func(*args, **kwargs)
        _stderr_console.print(f"[dim]{_timestamp()}[/dim] [blue]i[/blue] {result.announce}")

        for progress_percent, message in result.progress_callback(result):
            _stderr_console.print(f"[dim]{_timestamp()}[/dim] Progress: {message} ({progress_percent:.0%})")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        if result.success:
            _stderr_console.print(f"[dim]{_timestamp()}[/dim] [green]✓[/green] {result.result}")
        else:
            _stderr_console.print(f"[dim]{_timestamp()}[/dim] [red]✗[/red] {result.result}")

        # Documents may carry ObjectId/datetime values
        typer.echo(json.dumps(result.output, indent=2, ensure_ascii=False, default=str))
        raise typer.Exit(0 if result.success else 1)

    return wrapper
