"""
Meter management commands.

Meters aggregate ingested events into billable usage.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, status_badge, success
from flexprice_cli.services.catalog import MeterService, meter_service

app = typer.Typer(help="Manage usage meters")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Name", "cyan", "name"),
    ("Event Name", "", "event_name"),
    ("Aggregation", "", "aggregation"),
    ("Status", "", "status"),
]


def _get_service(ctx: typer.Context) -> MeterService:
    """Get meter service."""
    return meter_service(get_client(ctx))


def _format_aggregation(value: Any) -> str:
    """Aggregation type ("sum", "count", ...) from the aggregation object."""
    if isinstance(value, dict):
        return str(value.get("type", ""))
    return "" if value is None else str(value)


@app.command("list")
def list_meters(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all meters."""
    svc = _get_service(ctx)
    with spinner("Fetching meters..."):
        meters = svc.list()
    print_table(
        "Meters",
        COLUMNS,
        meters,
        as_json=as_json,
        formatters={"aggregation": _format_aggregation, "status": status_badge},
    )


@app.command("get")
def get_meter(
    ctx: typer.Context,
    meter_id: Annotated[str, typer.Argument(help="Meter ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a meter by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching meter..."):
        meter = svc.get(meter_id)
    print_detail(meter, as_json=as_json)


@app.command("create")
def create_meter(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with meter data")],
) -> None:
    """Create a new meter from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating meter..."):
        meter = svc.create(data)
    success(f"Meter created: {meter.id}")
    print_detail(meter)


@app.command("delete")
def delete_meter(
    ctx: typer.Context,
    meter_id: Annotated[str, typer.Argument(help="Meter ID")],
) -> None:
    """Delete a meter by ID."""
    svc = _get_service(ctx)
    with spinner("Deleting meter..."):
        svc.delete(meter_id)
    success(f"Meter {meter_id} deleted.")
