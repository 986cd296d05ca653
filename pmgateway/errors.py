"""
Exception hierarchy for gateway and transport failures.

Local validation failures (empty tokens, unknown delete options) and remote
failures (HTTP status codes, network errors) share one base class so callers
can handle every outcome of a gateway call in a single ``except`` clause.
Nothing here is retried.
"""

from typing import Any, Optional


class GatewayError(Exception):
    """Base exception for every failure surfaced by the gateway."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(GatewayError):
    """Required client settings are missing or invalid."""


class NotFoundError(GatewayError):
    """404, or a blank token rejected before any request is made."""

    def __init__(self, message: str = "Not Found"):
        super().__init__(message, status_code=404)


class InvalidOptionsError(GatewayError):
    """Options failed local validation; no request was sent."""


class InvalidKeysError(InvalidOptionsError):
    """Options carried keys outside the operation's whitelist."""

    def __init__(self, invalid_keys: list[str]):
        super().__init__(f"These keys are invalid: {', '.join(invalid_keys)}")
        self.invalid_keys = invalid_keys


class ApiValidationError(GatewayError):
    """422 error response: the API rejected the submitted attributes."""

    def __init__(self, message: str, errors: Optional[dict[str, Any]] = None, params: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=422)
        self.errors = errors or {}
        self.params = params or {}


class TransportError(GatewayError):
    """The request never produced an HTTP response (DNS, connection reset, ...)."""


class RequestTimeoutError(TransportError):
    """The transport gave up waiting for a response."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message, status_code=408)


class AuthenticationError(GatewayError):
    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, status_code=401)


class AuthorizationError(GatewayError):
    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, status_code=403)


class UpgradeRequiredError(GatewayError):
    def __init__(self, message: str = "Client library must be upgraded"):
        super().__init__(message, status_code=426)


class TooManyRequestsError(GatewayError):
    def __init__(self, message: str = "Too many requests"):
        super().__init__(message, status_code=429)


class ServerError(GatewayError):
    def __init__(self, message: str = "Server error"):
        super().__init__(message, status_code=500)


class ServiceUnavailableError(GatewayError):
    """503, typically scheduled maintenance."""

    def __init__(self, message: str = "Service unavailable"):
        super().__init__(message, status_code=503)


class GatewayTimeoutError(GatewayError):
    def __init__(self, message: str = "Gateway timeout"):
        super().__init__(message, status_code=504)


class UnexpectedError(GatewayError):
    """Any status code the client has no specific mapping for."""


STATUS_ERRORS: dict[int, type[GatewayError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    426: UpgradeRequiredError,
    429: TooManyRequestsError,
    500: ServerError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
}


def error_for_status(status_code: int, message: Optional[str] = None) -> GatewayError:
    """Build the exception matching an unsuccessful HTTP status code."""
    error_cls = STATUS_ERRORS.get(status_code)
    if error_cls is None:
        return UnexpectedError(message or f"Unexpected HTTP response: {status_code}", status_code=status_code)
    return error_cls(message) if message else error_cls()
