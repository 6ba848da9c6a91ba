"""
Services for the FlexPrice product catalog.

Plans, features, entitlements and meters only need the standard
list/get/create/delete operations.
"""

from __future__ import annotations

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.constants import Endpoints
from flexprice_cli.models.resources import Entitlement, Feature, Meter, Plan
from flexprice_cli.services.base import BaseService


class PlanService(BaseService):
    """Service for pricing plans."""

    model = Plan

    @property
    def base_path(self) -> str:
        return Endpoints.PLANS


class FeatureService(BaseService):
    """Service for features."""

    model = Feature

    @property
    def base_path(self) -> str:
        return Endpoints.FEATURES


class EntitlementService(BaseService):
    """Service for plan entitlements."""

    model = Entitlement

    @property
    def base_path(self) -> str:
        return Endpoints.ENTITLEMENTS


class MeterService(BaseService):
    """Service for usage meters."""

    model = Meter

    @property
    def base_path(self) -> str:
        return Endpoints.METERS


def plan_service(client: FlexPriceClient) -> PlanService:
    """Create a plan service."""
    return PlanService(client)


def feature_service(client: FlexPriceClient) -> FeatureService:
    """Create a feature service."""
    return FeatureService(client)


def entitlement_service(client: FlexPriceClient) -> EntitlementService:
    """Create an entitlement service."""
    return EntitlementService(client)


def meter_service(client: FlexPriceClient) -> MeterService:
    """Create a meter service."""
    return MeterService(client)
