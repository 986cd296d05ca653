from pmgateway.transport.base import HttpTransport, JsonObject
from pmgateway.transport.httpx_transport import HttpxTransport
from pmgateway.transport.mock_transport import MockTransport, RecordedCall

__all__ = ["HttpTransport", "JsonObject", "HttpxTransport", "MockTransport", "RecordedCall"]
