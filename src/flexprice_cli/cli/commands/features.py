"""
Feature management commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, status_badge, success
from flexprice_cli.services.catalog import FeatureService, feature_service

app = typer.Typer(help="Manage features")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Name", "cyan", "name"),
    ("Lookup Key", "", "lookup_key"),
    ("Type", "", "type"),
    ("Status", "", "status"),
]


def _get_service(ctx: typer.Context) -> FeatureService:
    """Get feature service."""
    return feature_service(get_client(ctx))


@app.command("list")
def list_features(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all features."""
    svc = _get_service(ctx)
    with spinner("Fetching features..."):
        features = svc.list()
    print_table("Features", COLUMNS, features, as_json=as_json, formatters={"status": status_badge})


@app.command("get")
def get_feature(
    ctx: typer.Context,
    feature_id: Annotated[str, typer.Argument(help="Feature ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a feature by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching feature..."):
        feature = svc.get(feature_id)
    print_detail(feature, as_json=as_json)


@app.command("create")
def create_feature(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with feature data")],
) -> None:
    """Create a new feature from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating feature..."):
        feature = svc.create(data)
    success(f"Feature created: {feature.id}")
    print_detail(feature)


@app.command("delete")
def delete_feature(
    ctx: typer.Context,
    feature_id: Annotated[str, typer.Argument(help="Feature ID")],
) -> None:
    """Delete a feature by ID."""
    svc = _get_service(ctx)
    with spinner("Deleting feature..."):
        svc.delete(feature_id)
    success(f"Feature {feature_id} deleted.")
