"""
Customer management commands.

Provides commands for listing, creating and deleting customers and for
viewing their usage and entitlements.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import Column, print_detail, print_table, spinner, status_badge, success
from flexprice_cli.services.customers import CustomerService, customer_service

app = typer.Typer(help="Manage customers")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Name", "cyan", "name"),
    ("Email", "", "email"),
    ("External ID", "", "external_id"),
    ("Status", "", "status"),
]


def _get_service(ctx: typer.Context) -> CustomerService:
    """Get customer service."""
    return customer_service(get_client(ctx))


@app.command("list")
def list_customers(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all customers."""
    svc = _get_service(ctx)
    with spinner("Fetching customers..."):
        customers = svc.list()
    print_table("Customers", COLUMNS, customers, as_json=as_json, formatters={"status": status_badge})


@app.command("get")
def get_customer(
    ctx: typer.Context,
    customer_id: Annotated[str, typer.Argument(help="Customer ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a customer by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching customer..."):
        customer = svc.get(customer_id)
    print_detail(customer, as_json=as_json)


@app.command("create")
def create_customer(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with customer data")],
) -> None:
    """Create a new customer from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating customer..."):
        customer = svc.create(data)
    success(f"Customer created: {customer.id}")
    print_detail(customer)


@app.command("delete")
def delete_customer(
    ctx: typer.Context,
    customer_id: Annotated[str, typer.Argument(help="Customer ID")],
) -> None:
    """Delete a customer by ID."""
    svc = _get_service(ctx)
    with spinner("Deleting customer..."):
        svc.delete(customer_id)
    success(f"Customer {customer_id} deleted.")


@app.command("usage")
def customer_usage(
    ctx: typer.Context,
    customer_id: Annotated[str, typer.Argument(help="Customer ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """View customer usage summary."""
    svc = _get_service(ctx)
    with spinner("Fetching usage..."):
        usage = svc.usage(customer_id)
    print_detail(usage, as_json=as_json)


@app.command("entitlements")
def customer_entitlements(
    ctx: typer.Context,
    customer_id: Annotated[str, typer.Argument(help="Customer ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """View customer entitlements."""
    svc = _get_service(ctx)
    with spinner("Fetching entitlements..."):
        entitlements = svc.entitlements(customer_id)
    print_detail(entitlements, as_json=as_json)
