"""
Payment method lifecycle gateway.

Translates create / find / update / grant / revoke / delete into calls
against ``{base_merchant_path}/payment_methods/...`` and resolves the
heterogeneous responses into payment method variants.

Every operation is a coroutine. Local validation (blank tokens, unknown
delete options) raises only when the coroutine is awaited, through the same
channel as transport and API errors, and before any request is sent.
"""

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional
from urllib.parse import quote

from pmgateway.audit.logger import log_event
from pmgateway.errors import NotFoundError
from pmgateway.gateway.base import Gateway, ResponseHandler
from pmgateway.gateway.resolver import parse_payment_method
from pmgateway.models.options import DeleteOptions, GrantAttributes, build_grant_options
from pmgateway.models.payment_method import (
    AndroidPayCard,
    ApplePayCard,
    CoinbaseAccount,
    CreditCard,
    PaymentMethod,
    PaymentMethodNonce,
    PayPalAccount,
)
from pmgateway.models.results import SuccessfulResult
from pmgateway.transport.base import HttpTransport, JsonObject
from pmgateway.wire import encode_query

logger = logging.getLogger("pmgateway.payment_method")

# Keys the generic handler builds itself; the remaining variants are only
# recognized by the resolver pass in response_handler().
RESPONSE_MAPPING = {
    "paypalAccount": PayPalAccount,
    "coinbaseAccount": CoinbaseAccount,
    "creditCard": CreditCard,
    "applePayCard": ApplePayCard,
    "androidPayCard": AndroidPayCard,
    "paymentMethodNonce": PaymentMethodNonce,
}


def _check_token(token: Optional[str]) -> str:
    if token is None or not str(token).strip():
        raise NotFoundError("Not Found")
    return token


class PaymentMethodGateway(Gateway):
    """
    Gateway for vaulted payment methods.

    Args:
        http: Transport issuing the requests.
        config: Anything exposing ``base_merchant_path()``.
    """

    def __init__(self, http: HttpTransport, config: Any):
        self.http = http
        self.config = config

    def _path(self, suffix: str = "") -> str:
        return f"{self.config.base_merchant_path()}/payment_methods{suffix}"

    def response_handler(self) -> ResponseHandler:
        handler = self.create_response_handler(RESPONSE_MAPPING)

        def handle(payload: JsonObject) -> SuccessfulResult:
            result = handler(payload)
            resolved = parse_payment_method(payload)
            if isinstance(resolved, PaymentMethodNonce):
                return replace(result, payment_method_nonce=resolved)
            return replace(result, payment_method=resolved)

        return handle

    async def create(self, attributes: Mapping[str, Any]) -> SuccessfulResult:
        path = self._path()
        log_event("payment_method_create", details={"path": path, "keys": sorted(attributes or {})})
        response = await self.http.post(path, {"paymentMethod": attributes})
        return self.response_handler()(response)

    async def find(self, token: str) -> PaymentMethod:
        token = _check_token(token)
        path = self._path(f"/any/{quote(token, safe='')}")
        log_event("payment_method_find", token=token)
        response = await self.http.get(path)
        resolved = parse_payment_method(response)
        logger.debug("Resolved payment method as %s", resolved.kind.value)
        return resolved

    async def update(self, token: str, attributes: Mapping[str, Any]) -> SuccessfulResult:
        token = _check_token(token)
        path = self._path(f"/any/{quote(token, safe='')}")
        log_event("payment_method_update", token=token, details={"keys": sorted(attributes or {})})
        response = await self.http.put(path, {"paymentMethod": attributes})
        return self.response_handler()(response)

    async def grant(self, token: str, attributes: GrantAttributes = None) -> SuccessfulResult:
        token = _check_token(token)
        grant_options = build_grant_options(token, attributes)
        log_event("payment_method_grant", token=token, details={
            "keys": sorted(k for k in grant_options if k != "sharedPaymentMethodToken"),
        })
        response = await self.http.post(self._path("/grant"), {"payment_method": grant_options})
        return self.response_handler()(response)

    async def revoke(self, token: str) -> SuccessfulResult:
        token = _check_token(token)
        log_event("payment_method_revoke", token=token)
        response = await self.http.post(self._path("/revoke"), {
            "payment_method": {"sharedPaymentMethodToken": token},
        })
        return self.response_handler()(response)

    async def delete(self, token: str, options: Optional[Mapping[str, Any]] = None) -> None:
        delete_options = DeleteOptions.parse(options)
        token = _check_token(token)

        query = encode_query(delete_options.query_params())
        path = self._path(f"/any/{quote(token, safe='')}") + (f"?{query}" if query else "")
        log_event("payment_method_delete", token=token, details={"query": query or None})
        await self.http.delete(path)
