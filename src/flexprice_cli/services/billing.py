"""
Services for subscriptions, invoices and wallets.

These resources carry lifecycle actions (cancel, finalize, void, top-up)
on top of the standard CRUD operations.
"""

from __future__ import annotations

from typing import Any

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.constants import Endpoints
from flexprice_cli.models.resources import Invoice, Subscription, Wallet, WalletBalance
from flexprice_cli.services.base import BaseService


class SubscriptionService(BaseService):
    """
    Service for managing subscriptions.

    Usage:
        svc = SubscriptionService(client)
        svc.cancel("sub_123")
        usage = svc.usage({"subscription_id": "sub_123"})
    """

    model = Subscription

    @property
    def base_path(self) -> str:
        return Endpoints.SUBSCRIPTIONS

    def cancel(self, subscription_id: str) -> Any:
        """Cancel a subscription."""
        return self.client.post_empty(
            Endpoints.SUBSCRIPTION_CANCEL.format(subscription_id=subscription_id)
        )

    def usage(self, query: dict[str, Any]) -> Any:
        """Query usage for a subscription."""
        return self.client.post(Endpoints.SUBSCRIPTION_USAGE, json_data=query)


class InvoiceService(BaseService):
    """
    Service for managing invoices.

    Usage:
        svc = InvoiceService(client)
        svc.finalize("inv_123")
        pdf = svc.pdf("inv_123")
    """

    model = Invoice

    @property
    def base_path(self) -> str:
        return Endpoints.INVOICES

    def finalize(self, invoice_id: str) -> Any:
        """Finalize a draft invoice."""
        return self.client.post_empty(Endpoints.INVOICE_FINALIZE.format(invoice_id=invoice_id))

    def void(self, invoice_id: str) -> Any:
        """Void an invoice."""
        return self.client.post_empty(Endpoints.INVOICE_VOID.format(invoice_id=invoice_id))

    def pdf(self, invoice_id: str) -> str:
        """Download the invoice PDF as the raw response text."""
        return self.client.get_text(Endpoints.INVOICE_PDF.format(invoice_id=invoice_id))


class WalletService(BaseService):
    """Service for customer wallets and credit balances."""

    model = Wallet

    @property
    def base_path(self) -> str:
        return Endpoints.WALLETS

    def top_up(self, wallet_id: str, data: dict[str, Any]) -> Any:
        """Add credits to a wallet."""
        return self.client.post(Endpoints.WALLET_TOP_UP.format(wallet_id=wallet_id), json_data=data)

    def balance(self, wallet_id: str) -> WalletBalance:
        """Get the real-time balance of a wallet."""
        return self.client.get(
            Endpoints.WALLET_BALANCE.format(wallet_id=wallet_id), model=WalletBalance
        )


def subscription_service(client: FlexPriceClient) -> SubscriptionService:
    """Create a subscription service."""
    return SubscriptionService(client)


def invoice_service(client: FlexPriceClient) -> InvoiceService:
    """Create an invoice service."""
    return InvoiceService(client)


def wallet_service(client: FlexPriceClient) -> WalletService:
    """Create a wallet service."""
    return WalletService(client)
