"""
FlexPrice REST API client.

Provides a session-based client with automatic authentication headers
and uniform success/error response decoding.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from flexprice_cli.constants import APIConfig
from flexprice_cli.core.config import Credentials
from flexprice_cli.core.exceptions import (
    APIError,
    APITimeoutError,
    ConnectionCheckError,
    DecodeError,
    NetworkError,
)
from flexprice_cli.models.auth import ErrorBody

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Used when the error body carries no structured message
FALLBACK_ERROR_MESSAGES: dict[int, str] = {
    401: "Authentication failed. Run `flexprice auth login` or check your API key.",
    403: "Permission denied. Your credentials may not have access to this resource.",
    404: "Resource not found. Verify the ID is correct.",
}


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def status_reason(status_code: int) -> str:
    """Canonical reason phrase for a status code ("" when unknown)."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def build_error_message(status_code: int, body: str) -> str:
    """
    Describe a non-success response.

    A structured ``{error|message, hint}`` body gives
    ``"{status} ({reason}): {error} — {hint}"``; anything else falls back
    to a fixed message for 401/403/404 or ``"{status} {reason}: {body}"``.

    Args:
        status_code: HTTP status code
        body: Raw response body

    Returns:
        Human-readable error message
    """
    reason = status_reason(status_code)
    try:
        error = ErrorBody.model_validate_json(body)
    except ValidationError:
        error = None

    if error is not None:
        message = f"{status_code} ({reason}): {error.summary}"
        if error.hint:
            message += f" — {error.hint}"
        return message

    if status_code in FALLBACK_ERROR_MESSAGES:
        return FALLBACK_ERROR_MESSAGES[status_code]
    return f"{status_code} {reason}".rstrip() + f": {body}"


class FlexPriceClient:
    """
    FlexPrice REST API client.

    Usage:
        client = FlexPriceClient(credentials)

        customers = client.get("/v1/customers", model=ListResponse[Customer])
        created = client.post("/v1/customers", json_data={"name": "Acme"})
        pdf = client.get_text("/v1/invoices/inv_123/pdf")

    Each call is a single request: nothing is cached and nothing is retried.
    """

    DEFAULT_TIMEOUT: int = APIConfig.DEFAULT_TIMEOUT

    def __init__(self, credentials: Credentials, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize the API client.

        Args:
            credentials: Resolved credentials
            timeout: Request timeout in seconds
        """
        self.credentials = credentials
        self.timeout = timeout
        self.base_url = credentials.api_url.rstrip("/") or APIConfig.DEFAULT_URL
        self._session = requests.Session()

    def url(self, path: str) -> str:
        return self.base_url + path

    def _build_headers(self, authenticated: bool = True) -> dict[str, str]:
        """Build auth and environment headers for a request."""
        headers: dict[str, str] = {}
        if not authenticated:
            return headers

        auth = self.credentials.auth_header()
        if auth is not None:
            name, value = auth
            headers[name] = value
        if self.credentials.environment_id:
            headers[APIConfig.ENVIRONMENT_HEADER] = self.credentials.environment_id
        return headers

    def _send(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        authenticated: bool = True,
    ) -> requests.Response:
        """
        Send one request.

        Raises:
            APITimeoutError: If the request times out
            NetworkError: If no response was received
        """
        logger.debug(f"API {method} {path}")

        try:
            return self._session.request(
                method=method,
                url=self.url(path),
                headers=self._build_headers(authenticated),
                json=json_data,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise APITimeoutError(f"Request timed out: {e}", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request failed: {e}", cause=e) from e

    def _raise_for_status(self, response: requests.Response) -> None:
        """
        Raise APIError for a non-success response.

        Raises:
            APIError: With a message built from the body or the status
        """
        if is_success(response.status_code):
            return
        body = response.text
        message = build_error_message(response.status_code, body)
        logger.debug(f"API error {response.status_code}: {body}")
        raise APIError(response.status_code, message, body)

    def _decode(self, response: requests.Response, model: type[ModelT] | None) -> Any:
        """
        Decode a success response body.

        Raises:
            DecodeError: If the body is not JSON or does not fit the model
        """
        body = response.text
        if model is None:
            if not body.strip():
                return None
            try:
                return json.loads(body)
            except ValueError as e:
                raise DecodeError(f"Failed to parse response body: {e}", body) from e

        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Failed to parse response body as {model.__name__}: {e}", body
            ) from e

    def request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        model: type[ModelT] | None = None,
    ) -> Any:
        """
        Make an authenticated request to the FlexPrice API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., '/v1/customers')
            json_data: JSON body for POST/PUT requests
            model: Pydantic model to validate the response into

        Returns:
            Model instance when ``model`` is given, otherwise the parsed JSON
            (None for an empty body)

        Raises:
            APIError: If the API returns a non-success status
            NetworkError: If the request could not be sent
            DecodeError: If a success body cannot be decoded
        """
        response = self._send(method, path, json_data=json_data)
        self._raise_for_status(response)
        return self._decode(response, model)

    def get(self, path: str, model: type[ModelT] | None = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, model=model)

    def post(self, path: str, json_data: Any, model: type[ModelT] | None = None) -> Any:
        """Make a POST request with a JSON body."""
        return self.request("POST", path, json_data=json_data, model=model)

    def post_empty(self, path: str, model: type[ModelT] | None = None) -> Any:
        """Make a POST request without a body."""
        return self.request("POST", path, model=model)

    def put(self, path: str, json_data: Any, model: type[ModelT] | None = None) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, json_data=json_data, model=model)

    def delete(self, path: str, model: type[ModelT] | None = None) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path, model=model)

    def delete_empty(self, path: str) -> None:
        """Make a DELETE request and ignore any response body."""
        response = self._send("DELETE", path)
        self._raise_for_status(response)

    def get_text(self, path: str) -> str:
        """
        GET a body without decoding it (e.g. invoice PDFs).

        Raises:
            APIError: If the API returns a non-success status
            NetworkError: If the request could not be sent
        """
        response = self._send("GET", path)
        self._raise_for_status(response)
        return response.text

    def health_check(self) -> None:
        """
        Check that the API is reachable.

        Raises:
            ConnectionCheckError: For any failure, transport or HTTP
        """
        try:
            response = self._send("GET", APIConfig.HEALTH_PATH, authenticated=False)
        except NetworkError as e:
            raise ConnectionCheckError(f"Cannot reach FlexPrice API: {e}") from e
        if not is_success(response.status_code):
            raise ConnectionCheckError(f"API returned status {response.status_code}")
