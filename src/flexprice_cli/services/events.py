"""
Service for usage events.

Events are ingested and queried as free-form JSON. Only single-event
lookups are validated into the Event model.
"""

from __future__ import annotations

from typing import Any

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.constants import Endpoints
from flexprice_cli.models.resources import Event
from flexprice_cli.services.base import BaseService


class EventService(BaseService):
    """
    Service for ingesting and querying usage events.

    Usage:
        svc = EventService(client)
        svc.ingest({"event_name": "api_call", "external_customer_id": "c1"})
        usage = svc.usage({"event_name": "api_call"})
    """

    @property
    def base_path(self) -> str:
        return Endpoints.EVENTS

    def get(self, id: str) -> Event:
        """Get a single event by ID."""
        return self.client.get(f"{self.base_path}/{id}", model=Event)

    def ingest(self, event: dict[str, Any]) -> Any:
        """Ingest a single event."""
        return self.client.post(Endpoints.EVENTS, json_data=event)

    def ingest_bulk(self, body: Any) -> Any:
        """Ingest a batch of events."""
        return self.client.post(Endpoints.EVENTS_BULK, json_data=body)

    def recent(self) -> Any:
        """Get the raw recent-events response."""
        return self.client.get(Endpoints.EVENTS)

    def usage(self, query: dict[str, Any]) -> Any:
        """Query aggregated usage."""
        return self.client.post(Endpoints.EVENTS_USAGE, json_data=query)


def event_service(client: FlexPriceClient) -> EventService:
    """Create an event service."""
    return EventService(client)
