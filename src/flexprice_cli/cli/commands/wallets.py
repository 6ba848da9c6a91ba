"""
Wallet management commands.

Wallets hold prepaid credits for a customer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from flexprice_cli.cli.utils import get_client, load_json_file
from flexprice_cli.cli.utils.output import (
    Column,
    format_amount,
    print_detail,
    print_table,
    spinner,
    status_badge,
    success,
)
from flexprice_cli.services.billing import WalletService, wallet_service

app = typer.Typer(help="Manage customer wallets")

COLUMNS: list[Column] = [
    ("ID", "dim", "id"),
    ("Customer", "cyan", "customer_id"),
    ("Balance", "", "balance"),
    ("Currency", "", "currency"),
    ("Status", "", "wallet_status"),
]


def _get_service(ctx: typer.Context) -> WalletService:
    """Get wallet service."""
    return wallet_service(get_client(ctx))


@app.command("list")
def list_wallets(
    ctx: typer.Context,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all wallets."""
    svc = _get_service(ctx)
    with spinner("Fetching wallets..."):
        wallets = svc.list()
    print_table(
        "Wallets",
        COLUMNS,
        wallets,
        as_json=as_json,
        formatters={"balance": format_amount, "wallet_status": status_badge},
    )


@app.command("get")
def get_wallet(
    ctx: typer.Context,
    wallet_id: Annotated[str, typer.Argument(help="Wallet ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Get a wallet by ID."""
    svc = _get_service(ctx)
    with spinner("Fetching wallet..."):
        wallet = svc.get(wallet_id)
    print_detail(wallet, as_json=as_json)


@app.command("create")
def create_wallet(
    ctx: typer.Context,
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with wallet data")],
) -> None:
    """Create a new wallet from a JSON file."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Creating wallet..."):
        wallet = svc.create(data)
    success(f"Wallet created: {wallet.id}")
    print_detail(wallet)


@app.command("top-up")
def top_up_wallet(
    ctx: typer.Context,
    wallet_id: Annotated[str, typer.Argument(help="Wallet ID")],
    file: Annotated[Path, typer.Option("--json", help="Path to JSON file with top-up data")],
) -> None:
    """Add credits to a wallet."""
    data = load_json_file(file)
    svc = _get_service(ctx)
    with spinner("Topping up wallet..."):
        result = svc.top_up(wallet_id, data)
    success(f"Wallet {wallet_id} topped up.")
    if result is not None:
        print_detail(result)


@app.command("balance")
def wallet_balance(
    ctx: typer.Context,
    wallet_id: Annotated[str, typer.Argument(help="Wallet ID")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the real-time balance of a wallet."""
    svc = _get_service(ctx)
    with spinner("Fetching balance..."):
        balance = svc.balance(wallet_id)
    print_detail(balance, as_json=as_json)
