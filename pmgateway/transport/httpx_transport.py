"""
HTTP transport backed by ``httpx.AsyncClient``.

Bodies go out as JSON with snake_case keys and come back with camelCase
keys. Status handling:
  - 2xx: parsed body (``{}`` when empty)
  - 422: parsed body; it carries ``apiErrorResponse`` for the response
    handler to triage
  - anything else: the matching ``pmgateway.errors`` exception
Network failures and timeouts raise TransportError / RequestTimeoutError.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from pmgateway.config import Settings
from pmgateway.errors import RequestTimeoutError, TransportError, UnexpectedError, error_for_status
from pmgateway.transport.base import HttpTransport, JsonObject
from pmgateway.wire import camel_case_keys, snake_case_keys

logger = logging.getLogger("pmgateway.transport")

UNPROCESSABLE_ENTITY = 422


class HttpxTransport(HttpTransport):
    """Production transport against the processor's REST API."""

    def __init__(
        self,
        config: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        auth = (config.public_key, config.private_key) if config.public_key else None
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url(),
            auth=auth,
            timeout=config.timeout_seconds,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "X-ApiVersion": config.api_version,
                "User-Agent": "pmgateway-python",
            },
            transport=transport,
        )

    async def _request(self, verb: str, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        payload = snake_case_keys(body) if body is not None else None
        logger.debug("%s %s", verb, path)

        try:
            response = await self._client.request(verb, path, json=payload)
        except httpx.TimeoutException as e:
            logger.error("%s %s timed out: %s", verb, path, e)
            raise RequestTimeoutError(f"{verb} {path} timed out") from e
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", verb, path, e)
            raise TransportError(f"{verb} {path} failed: {e}") from e

        status = response.status_code
        logger.debug("%s %s -> %d", verb, path, status)

        if not (200 <= status < 300 or status == UNPROCESSABLE_ENTITY):
            logger.warning("%s %s returned HTTP %d", verb, path, status)
            raise error_for_status(status)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedError(f"Malformed JSON in response to {verb} {path}", status_code=status) from e
        if not isinstance(data, dict):
            raise UnexpectedError(
                f"Expected a JSON object in response to {verb} {path}, got {type(data).__name__}",
                status_code=status,
            )
        return camel_case_keys(data)

    async def get(self, path: str) -> JsonObject:
        return await self._request("GET", path)

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        return await self._request("POST", path, body)

    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        return await self._request("PUT", path, body)

    async def delete(self, path: str) -> Optional[JsonObject]:
        return await self._request("DELETE", path)

    async def close(self) -> None:
        await self._client.aclose()
