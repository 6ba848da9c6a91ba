"""
Constants, defaults, and API endpoints for flexprice-cli.

This module provides centralized configuration for:
- FlexPrice API defaults and headers
- Credential storage locations and environment variable names
- Resource endpoint paths
- Dashboard tab definitions
"""

from __future__ import annotations

from typing import Final, NamedTuple

# =============================================================================
# FlexPrice API Configuration
# =============================================================================


class APIConfig:
    """FlexPrice REST API configuration constants."""

    DEFAULT_URL: Final[str] = "http://localhost:8080"
    DEFAULT_TIMEOUT: Final[int] = 30

    API_KEY_HEADER: Final[str] = "x-api-key"
    AUTHORIZATION_HEADER: Final[str] = "Authorization"
    ENVIRONMENT_HEADER: Final[str] = "x-environment-id"

    HEALTH_PATH: Final[str] = "/health"


# =============================================================================
# Credential Storage
# =============================================================================


class CredentialConfig:
    """Locations and environment variables used during credential resolution."""

    ENV_PREFIX: Final[str] = "FLEXPRICE_"

    CONFIG_DIR_NAME: Final[str] = ".flexprice"
    CREDENTIALS_FILE: Final[str] = "credentials.json"

    NOT_SET: Final[str] = "(not set)"


# =============================================================================
# Endpoints
# =============================================================================


class Endpoints:
    """FlexPrice API endpoint paths."""

    # Auth
    LOGIN: Final[str] = "/v1/auth/login"
    CURRENT_USER: Final[str] = "/v1/users/me"

    # Customers
    CUSTOMERS: Final[str] = "/v1/customers"
    CUSTOMER_USAGE: Final[str] = "/v1/customers/{customer_id}/usage"
    CUSTOMER_ENTITLEMENTS: Final[str] = "/v1/customers/{customer_id}/entitlements"

    # Catalog
    PLANS: Final[str] = "/v1/plans"
    FEATURES: Final[str] = "/v1/features"
    ENTITLEMENTS: Final[str] = "/v1/entitlements"
    METERS: Final[str] = "/v1/meters"

    # Subscriptions
    SUBSCRIPTIONS: Final[str] = "/v1/subscriptions"
    SUBSCRIPTION_CANCEL: Final[str] = "/v1/subscriptions/{subscription_id}/cancel"
    SUBSCRIPTION_USAGE: Final[str] = "/v1/subscriptions/usage"

    # Invoices
    INVOICES: Final[str] = "/v1/invoices"
    INVOICE_FINALIZE: Final[str] = "/v1/invoices/{invoice_id}/finalize"
    INVOICE_VOID: Final[str] = "/v1/invoices/{invoice_id}/void"
    INVOICE_PDF: Final[str] = "/v1/invoices/{invoice_id}/pdf"

    # Events
    EVENTS: Final[str] = "/v1/events"
    EVENTS_BULK: Final[str] = "/v1/events/bulk"
    EVENTS_USAGE: Final[str] = "/v1/events/usage"

    # Wallets
    WALLETS: Final[str] = "/v1/wallets"
    WALLET_TOP_UP: Final[str] = "/v1/wallets/{wallet_id}/top-up"
    WALLET_BALANCE: Final[str] = "/v1/wallets/{wallet_id}/balance/real-time"


# =============================================================================
# Dashboard
# =============================================================================


class ResourceTab(NamedTuple):
    """A browsable resource category in the dashboard."""

    name: str
    endpoint: str


DASHBOARD_TABS: Final[tuple[ResourceTab, ...]] = (
    ResourceTab("Customers", Endpoints.CUSTOMERS),
    ResourceTab("Plans", Endpoints.PLANS),
    ResourceTab("Subscriptions", Endpoints.SUBSCRIPTIONS),
    ResourceTab("Invoices", Endpoints.INVOICES),
    ResourceTab("Meters", Endpoints.METERS),
    ResourceTab("Wallets", Endpoints.WALLETS),
    ResourceTab("Features", Endpoints.FEATURES),
)

# Input poll interval for the dashboard loop, in seconds
DASHBOARD_POLL_INTERVAL: Final[float] = 0.1

# Field precedence for dashboard list lines
ITEM_NAME_FIELDS: Final[tuple[str, ...]] = ("name", "email", "event_name")
ITEM_STATUS_FIELDS: Final[tuple[str, ...]] = (
    "status",
    "subscription_status",
    "invoice_status",
    "wallet_status",
)
