"""
Usage event commands.

Events are the raw usage records meters aggregate. Payloads are read from
JSON files and responses are printed as JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import print_detail, spinner, success
from flexprice_cli.services.events import EventService, event_service

app = typer.Typer(help="Ingest and query usage events")


def _get_service(ctx: typer.Context) -> EventService:
    """Get event service."""
    return event_service(get_client(ctx))


@app.command("ingest")
def ingest_event(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with the event")],
) -> None:
    """Ingest a single event from a JSON file."""
    event = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Ingesting event..."):
        result = svc.ingest(event)
    success("Event ingested successfully!")
    if result is not None:
        print_detail(result)


@app.command("ingest-bulk")
def ingest_bulk(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with the events")],
) -> None:
    """Ingest events in bulk from a JSON file."""
    body = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Ingesting events in bulk..."):
        result = svc.ingest_bulk(body)
    success("Bulk events ingested successfully!")
    if result is not None:
        print_detail(result)


@app.command("list")
def list_events(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List recent events."""
    svc = _get_service(ctx)
    with spinner("Fetching events..."):
        events = svc.recent()
    print_detail(events, as_json=as_json)


@app.command("get")
def get_event(
    ctx: typer.Context,
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get an event by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching event..."):
        event = svc.get(event_id)
    print_detail(event, as_json=as_json)


@app.command("usage")
def event_usage(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with the usage query")],
) -> None:
    """Query aggregated event usage."""
    query = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Fetching usage..."):
        usage = svc.usage(query)
    print_detail(usage)
