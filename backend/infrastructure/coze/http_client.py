"""
Coze HTTP client using httpx.

Provides a thin wrapper around httpx for making HTTP requests to the Coze
knowledge API with bearer authentication, timeout handling, and error mapping.
Requests are never retried.
"""

import logging
from typing import Any

import httpx

from core.errors import normalize_error_message

from .config import CozeConfig
from .exceptions import (
    CozeAPIError,
    CozeConnectionError,
    CozeTimeoutError,
)

logger = logging.getLogger(__name__)


class CozeHttpClient:
    """
    HTTP client for the Coze API.

    Holds the static bearer token and space id for the lifetime of the
    process. The underlying httpx client is created lazily and reused for
    connection pooling.
    """

    def __init__(self, config: CozeConfig | None = None):
        """
        Initialize CozeHttpClient.

        Args:
            config: Coze configuration (read from Django settings if not provided)
        """
        self.config = config or CozeConfig.from_settings()
        self.base_url = self.config.base_url.rstrip("/")
        self._client: httpx.Client | None = None

        logger.info(f"CozeHttpClient initialized with base_url: {self.base_url}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the underlying httpx client."""
        if self._client:
            self._client.close()
            self._client = None

    @property
    def space_id(self) -> str:
        return self.config.space_id

    @property
    def client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=self._get_headers(),
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
            )
        return self._client

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.api_token}",
            "Content-Type": "application/json",
            "Agw-Js-Conv": "str",
        }

    def _handle_error_response(self, response: httpx.Response, operation: str):
        """
        Raise CozeAPIError for a non-2xx upstream response.

        The message prefers the upstream ``msg`` field, then the transport
        description of the failed status, then a generic fallback.
        """
        status_code = response.status_code

        try:
            data = response.json()
        except ValueError:
            data = None

        transport_message = f"Request failed with status code {status_code}"
        message = normalize_error_message(data, transport_message)
        error_code = data.get("code") if isinstance(data, dict) else None

        logger.error(f"Coze API error on {operation}: {data if data is not None else message}")

        raise CozeAPIError(
            message=message,
            status_code=status_code,
            response_data=data,
            error_code=str(error_code) if error_code is not None else None,
        )

    def request(
        self,
        method: str,
        path: str,
        params: dict = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL
            params: Query parameters (None values are dropped)
            json_data: JSON body

        Returns:
            Decoded JSON body, unchanged

        Raises:
            CozeConnectionError: For connection errors
            CozeTimeoutError: For timeout errors
            CozeAPIError: For non-2xx responses
        """
        if not path.startswith("/"):
            path = f"/{path}"
        operation = f"{method} {path}"

        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self.client.request(method, path, params=params or None, json=json_data)
        except httpx.TimeoutException as e:
            raise CozeTimeoutError(
                normalize_error_message(None, str(e), fallback=f"Request timeout: {operation}"),
                timeout=self.config.timeout,
                operation=operation,
            ) from e
        except httpx.TransportError as e:
            raise CozeConnectionError(
                normalize_error_message(None, str(e), fallback=f"Connection error: {operation}"),
                base_url=self.base_url,
                cause=e,
            ) from e

        if not response.is_success:
            self._handle_error_response(response, operation)

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise CozeAPIError(
                f"Invalid JSON in response to {operation}",
                status_code=response.status_code,
                response_data=response.text,
            ) from e

    def get(self, path: str, params: dict = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(self, path: str, json_data: Any = None, params: dict = None) -> Any:
        """Make a POST request."""
        return self.request("POST", path, params=params, json_data=json_data)

    def put(self, path: str, json_data: Any = None) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, json_data=json_data)

    def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path)
