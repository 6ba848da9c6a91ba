"""
Pydantic models for flexprice-cli.

Provides typed representations of FlexPrice API payloads:
- auth: Login request and session token response
- resources: Billing resources and the generic list wrapper
"""

from __future__ import annotations

from flexprice_cli.models.auth import AuthResponse, ErrorBody, LoginRequest
from flexprice_cli.models.resources import (
    Customer,
    Entitlement,
    Event,
    Feature,
    Invoice,
    ListResponse,
    Meter,
    Plan,
    Subscription,
    Wallet,
    WalletBalance,
)

__all__ = [
    # Auth
    "LoginRequest",
    "AuthResponse",
    "ErrorBody",
    # Resources
    "ListResponse",
    "Customer",
    "Plan",
    "Subscription",
    "Invoice",
    "Meter",
    "Event",
    "Wallet",
    "WalletBalance",
    "Feature",
    "Entitlement",
]
