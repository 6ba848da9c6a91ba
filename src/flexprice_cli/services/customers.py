"""
Service for FlexPrice customers.

Provides customer CRUD plus usage and entitlement lookups.
"""

from __future__ import annotations

from typing import Any

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.constants import Endpoints
from flexprice_cli.models.resources import Customer
from flexprice_cli.services.base import BaseService


class CustomerService(BaseService):
    """
    Service for managing FlexPrice customers.

    Usage:
        svc = CustomerService(client)
        customers = svc.list()
        usage = svc.usage("cus_123")
    """

    model = Customer

    @property
    def base_path(self) -> str:
        return Endpoints.CUSTOMERS

    def usage(self, customer_id: str) -> Any:
        """Get the usage summary for a customer."""
        return self.client.get(Endpoints.CUSTOMER_USAGE.format(customer_id=customer_id))

    def entitlements(self, customer_id: str) -> Any:
        """Get the entitlements a customer currently holds."""
        return self.client.get(Endpoints.CUSTOMER_ENTITLEMENTS.format(customer_id=customer_id))


def customer_service(client: FlexPriceClient) -> CustomerService:
    """Create a customer service."""
    return CustomerService(client)
