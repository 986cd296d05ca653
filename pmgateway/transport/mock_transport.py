"""
In-memory transport for tests and local development.

Records every call and replays canned outcomes:
  - Queued responses are returned in FIFO order
  - Queued exceptions are raised instead of returning
  - Optional latency simulates a network round trip
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pmgateway.transport.base import HttpTransport, JsonObject


@dataclass
class RecordedCall:
    """One request seen by the mock transport."""

    verb: str
    path: str
    body: Optional[dict[str, Any]] = None


class MockTransport(HttpTransport):
    """
    Transport double with scripted outcomes.

    When the queue is empty, ``default_response`` is returned (``{}`` unless
    given).
    """

    def __init__(
        self,
        responses: Optional[list[Union[JsonObject, Exception, None]]] = None,
        default_response: Optional[JsonObject] = None,
        latency_ms: int = 0,
    ):
        self._queue: list[Union[JsonObject, Exception, None]] = list(responses or [])
        self._default_response = default_response if default_response is not None else {}
        self._latency_ms = latency_ms
        self.calls: list[RecordedCall] = []
        self.closed = False

    def queue(self, outcome: Union[JsonObject, Exception, None]) -> None:
        self._queue.append(outcome)

    async def _respond(self, verb: str, path: str, body: Optional[Mapping[str, Any]] = None):
        self.calls.append(RecordedCall(verb=verb, path=path, body=dict(body) if body is not None else None))

        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000)

        outcome = self._queue.pop(0) if self._queue else self._default_response
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def get(self, path: str) -> JsonObject:
        return await self._respond("GET", path)

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        return await self._respond("POST", path, body)

    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> JsonObject:
        return await self._respond("PUT", path, body)

    async def delete(self, path: str) -> Optional[JsonObject]:
        return await self._respond("DELETE", path)

    async def close(self) -> None:
        self.closed = True
