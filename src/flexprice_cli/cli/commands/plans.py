"""
Plan management commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, status_badge, success
from flexprice_cli.services.catalog import PlanService, plan_service

app = typer.Typer(help="Manage pricing plans")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Name", "cyan", "name"),
    ("Description", "", "description"),
    ("Status", "", "status"),
]


def _get_service(ctx: typer.Context) -> PlanService:
    """Get plan service."""
    return plan_service(get_client(ctx))


@app.command("list")
def list_plans(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all plans."""
    svc = _get_service(ctx)
    with spinner("Fetching plans..."):
        plans = svc.list()
    print_table("Plans", COLUMNS, plans, as_json=as_json, formatters={"status": status_badge})


@app.command("get")
def get_plan(
    ctx: typer.Context,
    plan_id: Annotated[str, typer.Argument(help="Plan ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a plan by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching plan..."):
        plan = svc.get(plan_id)
    print_detail(plan, as_json=as_json)


@app.command("create")
def create_plan(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with plan data")],
) -> None:
    """Create a new plan from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating plan..."):
        plan = svc.create(data)
    success(f"Plan created: {plan.id}")
    print_detail(plan)


@app.command("delete")
def delete_plan(
    ctx: typer.Context,
    plan_id: Annotated[str, typer.Argument(help="Plan ID")],
) -> None:
    """Delete a plan by ID."""
    svc = _get_service(ctx)
    with spinner("Deleting plan..."):
        svc.delete(plan_id)
    success(f"Plan {plan_id} deleted.")
