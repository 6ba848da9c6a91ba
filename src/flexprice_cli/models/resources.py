"""
Billing resource models.

Every field except ``id`` is optional and unknown fields are kept, so the
models tolerate API additions and still round-trip the full payload for
JSON output.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """The ``{items: [...], total_count}`` wrapper of list endpoints."""

    items: list[T] = Field(default_factory=list)
    total_count: int | None = None


class Resource(BaseModel):
    """Base for API resources."""

    model_config = ConfigDict(extra="allow")

    id: str = ""
    created_at: str | None = None


class Customer(Resource):
    name: str | None = None
    email: str | None = None
    external_id: str | None = None
    status: str | None = None


class Plan(Resource):
    name: str | None = None
    description: str | None = None
    status: str | None = None


class Subscription(Resource):
    customer_id: str | None = None
    plan_id: str | None = None
    subscription_status: str | None = None
    current_period_start: str | None = None
    current_period_end: str | None = None


class Invoice(Resource):
    customer_id: str | None = None
    subscription_id: str | None = None
    invoice_status: str | None = None
    payment_status: str | None = None
    amount_due: float | None = None
    currency: str | None = None


class Meter(Resource):
    name: str | None = None
    event_name: str | None = None
    aggregation: Any = None
    status: str | None = None


class Event(BaseModel):
    """A usage event. Events may be returned before an ID is assigned."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    event_name: str | None = None
    external_customer_id: str | None = None
    timestamp: str | None = None
    properties: dict[str, Any] | None = None


class Wallet(Resource):
    customer_id: str | None = None
    balance: float | None = None
    currency: str | None = None
    wallet_status: str | None = None


class WalletBalance(BaseModel):
    model_config = ConfigDict(extra="allow")

    balance: float | None = None
    real_time_balance: float | None = None
    currency: str | None = None


class Feature(Resource):
    name: str | None = None
    lookup_key: str | None = None
    type: str | None = None
    status: str | None = None


class Entitlement(Resource):
    plan_id: str | None = None
    feature_id: str | None = None
    feature_type: str | None = None
    is_enabled: bool | None = None
    usage_limit: float | None = None
