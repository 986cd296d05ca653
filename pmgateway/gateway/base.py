"""
Generic response handling shared by resource gateways.

Triage happens in two steps:
  1. Error payloads (``apiErrorResponse``) raise ApiValidationError
  2. Success payloads become a SuccessfulResult whose resources are built
     from the keys the caller's mapping recognizes
"""

import logging
from typing import Any, Callable, Mapping

from pmgateway.errors import ApiValidationError
from pmgateway.gateway.resolver import sub_object
from pmgateway.models.results import SuccessfulResult
from pmgateway.transport.base import JsonObject

logger = logging.getLogger("pmgateway.gateway")

ResponseHandler = Callable[[JsonObject], SuccessfulResult]


class Gateway:
    """Base class for gateways that turn API payloads into results."""

    def create_response_handler(self, resource_map: Mapping[str, Callable[[Mapping[str, Any]], Any]]) -> ResponseHandler:
        def handler(response: JsonObject) -> SuccessfulResult:
            error = sub_object(response, "apiErrorResponse")
            if error is not None:
                message = error.get("message") or "Validation failed"
                logger.warning("API rejected request: %s", message)
                raise ApiValidationError(message, errors=error.get("errors"), params=error.get("params"))

            resources = {}
            for key, factory in resource_map.items():
                attributes = sub_object(response, key)
                if attributes is not None:
                    resources[key] = factory(attributes)
            return SuccessfulResult(resources=resources)

        return handler
