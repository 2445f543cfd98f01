"""Base class for third-party API clients.

Each request opens its own ``httpx.AsyncClient`` with an explicit timeout and
is attempted exactly once. Failures surface as ``UpstreamError`` carrying
the upstream status.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from courts_finder.core.config import Settings
from courts_finder.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


def _error_message(payload: Any, default: str) -> str:
    """Pull a human-readable message out of an upstream error body."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
        errors = payload.get("Errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            if errors[0].get("Message"):
                return str(errors[0]["Message"])
        for key in ("error_message", "message"):
            if payload.get(key):
                return str(payload[key])
    return default


class UpstreamClient:
    """Shared request plumbing for the provider clients."""

    provider_name = "Upstream"

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Application settings holding keys, base URLs and timeout
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.timeout = settings.UPSTREAM_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def api_key(self) -> Optional[str]:
        raise NotImplementedError

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _require_api_key(self) -> str:
        key = self.api_key
        if not key:
            logger.error(f"{self.provider_name} API key not configured")
            raise ConfigurationError(f"{self.provider_name} API key not configured")
        return key

    async def _make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> Any:
        """
        Make a single HTTP request and decode its JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            params: Query parameters
            json_data: JSON body data
            headers: Extra request headers
            content: Raw body, for requests signed over their exact bytes

        Returns:
            Response JSON data

        Raises:
            UpstreamError: On timeout, transport failure, non-success status
                or a body that is not JSON
        """
        logger.info(f"Making {method} request to {self.provider_name}: {url}")

        async with httpx.AsyncClient(
            transport=self._transport, timeout=self.timeout
        ) as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json_data,
                    headers=headers,
                    content=content,
                )
            except httpx.TimeoutException as e:
                logger.warning(f"{self.provider_name} request timed out: {e!r}")
                raise UpstreamError(
                    f"{self.provider_name} API timed out", status_code=504
                )
            except httpx.HTTPError as e:
                logger.warning(f"{self.provider_name} request failed: {e!r}")
                raise UpstreamError(
                    f"Failed to reach {self.provider_name} API", status_code=502
                )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            logger.warning(
                f"{self.provider_name} API error: {response.status_code} "
                f"{response.reason_phrase}"
            )
            raise UpstreamError(
                _error_message(
                    payload, f"Failed to fetch from {self.provider_name} API"
                ),
                status_code=response.status_code,
                payload=payload,
            )

        if payload is None:
            raise UpstreamError(
                f"Invalid response format from {self.provider_name} API",
                status_code=502,
            )

        return payload
