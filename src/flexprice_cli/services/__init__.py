"""
Service modules for flexprice-cli.

Contains resource services built on top of the API client, one per
FlexPrice resource family.
"""

from __future__ import annotations

from flexprice_cli.services.base import BaseService
from flexprice_cli.services.billing import (
    InvoiceService,
    SubscriptionService,
    WalletService,
    invoice_service,
    subscription_service,
    wallet_service,
)
from flexprice_cli.services.catalog import (
    EntitlementService,
    FeatureService,
    MeterService,
    PlanService,
    entitlement_service,
    feature_service,
    meter_service,
    plan_service,
)
from flexprice_cli.services.customers import CustomerService, customer_service
from flexprice_cli.services.events import EventService, event_service

__all__ = [  # noqa: RUF022
    # Base
    "BaseService",
    # Customers
    "CustomerService",
    "customer_service",
    # Catalog
    "PlanService",
    "FeatureService",
    "EntitlementService",
    "MeterService",
    "plan_service",
    "feature_service",
    "entitlement_service",
    "meter_service",
    # Billing
    "SubscriptionService",
    "InvoiceService",
    "WalletService",
    "subscription_service",
    "invoice_service",
    "wallet_service",
    # Events
    "EventService",
    "event_service",
]
