"""
Helper utilities for CLI commands.

Provides request body loading from JSON files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

# Default console for error output
_console = Console(stderr=True)


def load_json_file(path: str | Path, console: Console | None = None) -> Any:
    """Load and parse a JSON request body with error handling.

    Args:
        path: Path to JSON file
        console: Console for error output (uses default if None)

    Returns:
        Parsed JSON data

    Raises:
        typer.Exit: If file not found or invalid JSON
    """
    console = console or _console
    file_path = Path(path)

    if not file_path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1) from None
