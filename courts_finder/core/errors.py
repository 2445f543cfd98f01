"""Service-layer exceptions.

Services raise these; routes translate them into ``HTTPException``s with
:func:`to_http_exception`. Anything else escaping a service is treated as an
unexpected failure by the route that called it.
"""
from typing import Any, Dict, Optional

from fastapi import HTTPException


class ServiceError(Exception):
    """Base class for errors with a well-defined HTTP status."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code

    def detail(self) -> Dict[str, Any]:
        return {"error": self.error_code, "message": self.message}


class InvalidRequestError(ServiceError):
    """Malformed or incomplete client input."""

    status_code = 400
    error_code = "INVALID_REQUEST"


class MissingParametersError(InvalidRequestError):
    """One or more required parameters were not supplied."""

    error_code = "MISSING_PARAMETERS"

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameter(s): {', '.join(self.missing)}"
        )

    def detail(self) -> Dict[str, Any]:
        detail = super().detail()
        detail["missing"] = self.missing
        return detail


class AuthenticationError(ServiceError):
    status_code = 401
    error_code = "AUTH_FAILED"


class NotFoundError(ServiceError):
    status_code = 404
    error_code = "NOT_FOUND"


class RateLimitError(ServiceError):
    """Too many requests from one client."""

    status_code = 429
    error_code = "RATE_LIMIT_EXCEEDED"

    def __init__(self, message: str, retry_after: int = 60, limit: int = 0):
        super().__init__(message)
        self.retry_after = retry_after
        self.limit = limit

    def headers(self) -> Dict[str, str]:
        return {
            "Retry-After": str(self.retry_after),
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": "0",
        }


class ConfigurationError(ServiceError):
    """A required credential is absent from the settings."""

    status_code = 500
    error_code = "NOT_CONFIGURED"


class UpstreamError(ServiceError):
    """A third-party API answered with a non-success status.

    ``status_code`` is the upstream status so the route relays it as-is.
    """

    error_code = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        payload: Optional[Any] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message, error_code=error_code)
        self.status_code = status_code
        self.payload = payload

    def detail(self) -> Dict[str, Any]:
        detail = super().detail()
        detail["upstream_status"] = self.status_code
        if self.payload is not None:
            detail["upstream"] = self.payload
        return detail


def to_http_exception(error: ServiceError) -> HTTPException:
    """Convert a service error into the HTTPException a route raises."""
    headers = error.headers() if isinstance(error, RateLimitError) else None
    return HTTPException(
        status_code=error.status_code,
        detail=error.detail(),
        headers=headers,
    )


def require_params(**params) -> None:
    """Raise MissingParametersError naming every empty parameter."""
    missing = [name for name, value in params.items() if value in (None, "")]
    if missing:
        raise MissingParametersError(missing)
