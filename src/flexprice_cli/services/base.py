"""
Base service class for FlexPrice API operations.

Provides common CRUD operations that can be inherited by
resource-specific service classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

from flexprice_cli.api.client import FlexPriceClient
from flexprice_cli.models.resources import ListResponse


class BaseService(ABC):
    """
    Base class for FlexPrice API service operations.

    Provides standard operations (list, get, create, delete) that work
    with any API resource. Subclasses define the base_path and the model
    responses are validated into.

    Usage:
        class CustomerService(BaseService):
            model = Customer

            @property
            def base_path(self) -> str:
                return "/v1/customers"

        svc = CustomerService(client)
        customers = svc.list()
    """

    model: ClassVar[type[BaseModel] | None] = None

    def __init__(self, client: FlexPriceClient):
        """
        Initialize service with an authenticated API client.

        Args:
            client: Configured FlexPriceClient instance
        """
        self.client = client

    @property
    @abstractmethod
    def base_path(self) -> str:
        """Return the base API path for this resource (e.g., '/v1/customers')."""
        ...

    def list(self) -> list[Any]:
        """
        List resources.

        Returns:
            Items of the ``{items: [...]}`` wrapper, as models when the
            service declares one
        """
        if self.model is None:
            response = self.client.get(self.base_path) or {}
            items: list[Any] = response.get("items", [])
            return items
        response = self.client.get(self.base_path, model=ListResponse[self.model])  # type: ignore[name-defined]
        return list(response.items)

    def get(self, id: str) -> Any:
        """
        Get a single resource by ID.

        Args:
            id: Resource ID

        Returns:
            Resource model (or dict when the service has no model)
        """
        return self.client.get(f"{self.base_path}/{id}", model=self.model)

    def create(self, data: dict[str, Any]) -> Any:
        """
        Create a new resource.

        Args:
            data: Resource data dictionary

        Returns:
            Created resource (with ID)
        """
        return self.client.post(self.base_path, json_data=data, model=self.model)

    def delete(self, id: str) -> None:
        """
        Delete a resource. Any response body is ignored.

        Args:
            id: Resource ID
        """
        self.client.delete_empty(f"{self.base_path}/{id}")
