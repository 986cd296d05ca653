"""
Abstract HTTP transport interface.

The gateway only ever talks to this interface. Implementations own
everything below it: base URL, authentication, wire serialization, key-case
conversion, timeouts, and mapping of HTTP failures onto ``pmgateway.errors``.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

JsonObject = dict[str, Any]


class HttpTransport(ABC):
    """Verb-level HTTP client returning parsed JSON objects."""

    @abstractmethod
    async def get(self, path: str) -> JsonObject:
        ...

    @abstractmethod
    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        ...

    @abstractmethod
    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        ...

    @abstractmethod
    async def delete(self, path: str) -> Optional[JsonObject]:
        """
        Issue a DELETE.

        Raises:
            GatewayError: On any failed request; a successful delete may
                return ``None`` when the response has no body.
        """
        ...

    async def close(self) -> None:
        """Release pooled connections. No-op by default."""
