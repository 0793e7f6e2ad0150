"""Output helpers for the avarpc CLI.

Results go to stdout as plain JSON so they can be piped; diagnostics go
to stderr through rich.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

# Shared stderr console instance
err_console = Console(stderr=True)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    print(json.dumps(data, indent=2))


def print_error(message: str) -> None:
    """Print an error message in red to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def print_info(message: str) -> None:
    """Print an informational message to stderr."""
    err_console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)
