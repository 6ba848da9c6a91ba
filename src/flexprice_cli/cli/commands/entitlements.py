"""
Entitlement management commands.

Entitlements grant a plan access to a feature, optionally with a usage limit.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, success
from flexprice_cli.services.catalog import EntitlementService, entitlement_service

app = typer.Typer(help="Manage plan entitlements")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Plan", "cyan", "plan_id"),
    ("Feature", "", "feature_id"),
    ("Type", "", "feature_type"),
    ("Enabled", "", "is_enabled"),
    ("Usage Limit", "", "usage_limit"),
]


def _get_service(ctx: typer.Context) -> EntitlementService:
    """Get entitlement service."""
    return entitlement_service(get_client(ctx))


def _format_enabled(value: Any) -> str:
    if value is None:
        return ""
    return "[green]Yes[/green]" if value else "[dim]No[/dim]"


def _format_limit(value: Any) -> str:
    return "∞" if value is None else f"{value:.0f}"


@app.command("list")
def list_entitlements(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all entitlements."""
    svc = _get_service(ctx)
    with spinner("Fetching entitlements..."):
        entitlements = svc.list()
    print_table(
        "Entitlements",
        COLUMNS,
        entitlements,
        as_json=as_json,
        formatters={"is_enabled": _format_enabled, "usage_limit": _format_limit},
    )


@app.command("get")
def get_entitlement(
    ctx: typer.Context,
    entitlement_id: Annotated[str, typer.Argument(help="Entitlement ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get an entitlement by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching entitlement..."):
        entitlement = svc.get(entitlement_id)
    print_detail(entitlement, as_json=as_json)


@app.command("create")
def create_entitlement(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with entitlement data")],
) -> None:
    """Create a new entitlement from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating entitlement..."):
        entitlement = svc.create(data)
    success(f"Entitlement created: {entitlement.id}")
    print_detail(entitlement)


@app.command("delete")
def delete_entitlement(
    ctx: typer.Context,
    entitlement_id: Annotated[str, typer.Argument(help="Entitlement ID")],
) -> None:
    """Delete an entitlement by ID."""
    svc = _get_service(ctx)
    with spinner("Deleting entitlement..."):
        svc.delete(entitlement_id)
    success(f"Entitlement {entitlement_id} deleted.")
