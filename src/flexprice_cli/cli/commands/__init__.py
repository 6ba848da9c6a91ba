"""
CLI command modules for flexprice-cli.
"""

from __future__ import annotations

from flexprice_cli.cli.commands import (
    auth,
    customers,
    entitlements,
    events,
    features,
    invoices,
    meters,
    plans,
    subscriptions,
    wallets,
)

__all__ = [
    "auth",
    "customers",
    "entitlements",
    "events",
    "features",
    "invoices",
    "meters",
    "plans",
    "subscriptions",
    "wallets",
]
