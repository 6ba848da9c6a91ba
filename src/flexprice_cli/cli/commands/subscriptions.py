"""
Subscription management commands.

Provides commands for listing, creating and cancelling subscriptions and
for querying subscription usage.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, status_badge, success
from flexprice_cli.services.billing import SubscriptionService, subscription_service

app = typer.Typer(help="Manage subscriptions")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Customer", "cyan", "customer_id"),
    ("Plan", "", "plan_id"),
    ("Status", "", "subscription_status"),
    ("Period Start", "", "current_period_start"),
    ("Period End", "", "current_period_end"),
]


def _get_service(ctx: typer.Context) -> SubscriptionService:
    """Get subscription service."""
    return subscription_service(get_client(ctx))


@app.command("list")
def list_subscriptions(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all subscriptions."""
    svc = _get_service(ctx)
    with spinner("Fetching subscriptions..."):
        subscriptions = svc.list()
    print_table(
        "Subscriptions",
        COLUMNS,
        subscriptions,
        as_json=as_json,
        formatters={"subscription_status": status_badge},
    )


@app.command("get")
def get_subscription(
    ctx: typer.Context,
    subscription_id: Annotated[str, typer.Argument(help="Subscription ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a subscription by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching subscription..."):
        subscription = svc.get(subscription_id)
    print_detail(subscription, as_json=as_json)


@app.command("create")
def create_subscription(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with subscription data")],
) -> None:
    """Create a new subscription from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating subscription..."):
        subscription = svc.create(data)
    success(f"Subscription created: {subscription.id}")
    print_detail(subscription)


@app.command("cancel")
def cancel_subscription(
    ctx: typer.Context,
    subscription_id: Annotated[str, typer.Argument(help="Subscription ID")],
) -> None:
    """Cancel a subscription."""
    svc = _get_service(ctx)
    with spinner("Cancelling subscription..."):
        result = svc.cancel(subscription_id)
    success(f"Subscription {subscription_id} cancelled.")
    if result is not None:
        print_detail(result)


@app.command("usage")
def subscription_usage(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with the usage query")],
) -> None:
    """Query subscription usage."""
    query = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Fetching usage..."):
        usage = svc.usage(query)
    print_detail(usage)
