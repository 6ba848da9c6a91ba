"""
Output utilities for CLI commands.

Provides formatted output helpers for tables, detail views, status
badges, message lines and spinners.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

# Default consoles
_console = Console()
_err_console = Console(stderr=True)

STATUS_STYLES: dict[str, str] = {
    "active": "bold green",
    "published": "bold green",
    "paid": "bold green",
    "finalized": "bold green",
    "draft": "yellow",
    "pending": "yellow",
    "cancelled": "red",
    "canceled": "red",
    "void": "red",
    "voided": "red",
    "inactive": "red",
    "trialing": "blue",
    "paused": "blue",
}

BANNER = """\
╔═══════════════════════════════════════════╗
║                                           ║
║   ⚡ FlexPrice CLI                        ║
║   Usage-based billing, made simple.       ║
║                                           ║
╚═══════════════════════════════════════════╝"""

# (header, style, key)
Column = tuple[str, str, str | None]


def to_jsonable(value: Any) -> Any:
    """Convert models (and lists of models) to plain JSON data."""
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def create_table(
    title: str,
    columns: list[Column],
    items: list[dict[str, Any]],
    item_count: int | None = None,
) -> Table:
    """Create a Rich table from items.

    Args:
        title: Table title (count will be appended)
        columns: List of (header, style, key) tuples where:
            - header: Column header text
            - style: Rich style string (e.g., "cyan", "dim")
            - key: Dictionary key to extract value (None for custom handling)
        items: List of dictionaries to display
        item_count: Override count in title (uses len(items) if None)

    Returns:
        Configured Rich Table
    """
    count = item_count if item_count is not None else len(items)
    table = Table(title=f"{title} ({count})", header_style="bold cyan")

    for header, style, _ in columns:
        if header == "ID":
            table.add_column(header, style=style, no_wrap=True)
        else:
            table.add_column(header, style=style)

    return table


def add_table_rows(
    table: Table,
    columns: list[Column],
    items: list[dict[str, Any]],
    formatters: dict[str, Callable[[Any], str]] | None = None,
) -> None:
    """Add rows to a table from items.

    Args:
        table: Table to add rows to
        columns: Column definitions (same as create_table)
        items: Items to add as rows
        formatters: Optional dict of key -> formatter function
    """
    formatters = formatters or {}

    for item in items:
        row = []
        for _, _, key in columns:
            if key is None:
                row.append("")
            elif key in formatters:
                row.append(formatters[key](item.get(key)))
            else:
                value = item.get(key, "")
                row.append(str(value) if value is not None else "")
        table.add_row(*row)


def status_badge(value: str | None) -> str:
    """Format a status value with colour markup.

    Args:
        value: Status value (e.g. "active", "draft", "void")

    Returns:
        Formatted string with Rich markup ("" for None)
    """
    if not value:
        return ""
    style = STATUS_STYLES.get(value.lower())
    if style is None:
        return value
    return f"[{style}]{value}[/{style}]"


def format_amount(value: float | None) -> str:
    """Two-decimal amount, or "" when unknown."""
    if value is None:
        return ""
    return f"{value:.2f}"


def print_table(
    title: str,
    columns: list[Column],
    items: list[Any],
    as_json: bool = False,
    formatters: dict[str, Callable[[Any], str]] | None = None,
    console: Console | None = None,
) -> None:
    """Print items as a table, or as JSON with ``as_json``.

    Args:
        title: Table title
        columns: Column definitions
        items: Models or dicts to display
        as_json: Print the raw items as JSON instead
        formatters: Optional dict of key -> formatter function
        console: Console for output
    """
    console = console or _console
    data = to_jsonable(items)

    if as_json:
        console.print_json(data=data)
        return

    if not data:
        console.print("  [dim]No results found.[/dim]")
        return

    table = create_table(title, columns, data)
    add_table_rows(table, columns, data, formatters)
    console.print(table)


def print_detail(item: Any, as_json: bool = False, console: Console | None = None) -> None:
    """Print a single item as pretty JSON.

    Plain mode highlights keys; ``as_json`` prints undecorated JSON
    suitable for piping.
    """
    console = console or _console
    data = to_jsonable(item)
    if as_json:
        console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print_json(data=data)


def success(message: str, console: Console | None = None) -> None:
    """Print a success line with a checkmark."""
    (console or _console).print(f"  [bold green]✓[/bold green] {escape(message)}")


def info(message: str, console: Console | None = None) -> None:
    """Print an informational line."""
    (console or _console).print(f"  [bold blue]ℹ[/bold blue] {escape(message)}")


def warning(message: str, console: Console | None = None) -> None:
    """Print a warning line to stderr."""
    (console or _err_console).print(f"  [bold yellow]⚠[/bold yellow] {escape(message)}")


def error(message: str, console: Console | None = None) -> None:
    """Print an error line to stderr."""
    line = Text.assemble(("  ✗ ", "bold red"), message)
    (console or _err_console).print(line)


def print_banner(console: Console | None = None) -> None:
    """Print the FlexPrice banner."""
    (console or _console).print(Text(BANNER, style="cyan"))


@contextmanager
def spinner(message: str, console: Console | None = None) -> Iterator[None]:
    """Show a spinner while a request is in flight."""
    with (console or _console).status(message, spinner="dots"):
        yield
