"""Tests for the payment method gateway against the mock transport."""

import time

import pytest

from pmgateway.errors import ApiValidationError, InvalidKeysError, NotFoundError, ServerError
from pmgateway.gateway.payment_method_gateway import PaymentMethodGateway
from pmgateway.models.payment_method import (
    CreditCard,
    PaymentMethodNonce,
    PayPalAccount,
    UnknownPaymentMethod,
    UsBankAccount,
    VenmoAccount,
)
from pmgateway.models.results import SuccessfulResult
from pmgateway.transport.mock_transport import MockTransport

BASE = "/merchants/merchant_123/payment_methods"


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_credit_card(self, gateway, transport, credit_card_payload):
        transport.queue(credit_card_payload)
        result = await gateway.create({"creditCard": {"number": "4111111111111111"}})

        assert isinstance(result, SuccessfulResult)
        assert result.success is True
        assert isinstance(result.payment_method, CreditCard)
        assert result.payment_method.token == "cc_token_1"
        assert result.payment_method_nonce is None

        call = transport.calls[0]
        assert call.verb == "POST"
        assert call.path == BASE
        assert call.body == {"paymentMethod": {"creditCard": {"number": "4111111111111111"}}}

    @pytest.mark.asyncio
    async def test_create_returning_nonce(self, gateway, transport):
        transport.queue({"paymentMethodNonce": {"nonce": "abc-nonce"}})
        result = await gateway.create({"paymentMethodNonce": "fake"})

        assert isinstance(result.payment_method_nonce, PaymentMethodNonce)
        assert result.payment_method_nonce.nonce == "abc-nonce"
        assert result.payment_method is None

    @pytest.mark.asyncio
    async def test_variant_missing_from_generic_mapping(self, gateway, transport):
        """Bank accounts are only recognized by the resolver pass."""
        transport.queue({"usBankAccount": {"token": "bank_1"}})
        result = await gateway.create({"paymentMethodNonce": "fake"})

        assert isinstance(result.payment_method, UsBankAccount)
        assert "usBankAccount" not in result.resources

    @pytest.mark.asyncio
    async def test_generic_mapping_resources(self, gateway, transport):
        transport.queue({"paypalAccount": {"token": "pp_1", "email": "a@b.c"}})
        result = await gateway.create({"paymentMethodNonce": "fake"})

        assert isinstance(result.resources["paypalAccount"], PayPalAccount)
        assert result.payment_method == result.resources["paypalAccount"]

    @pytest.mark.asyncio
    async def test_unrecognized_response(self, gateway, transport):
        transport.queue({"somethingNew": {"token": "x"}})
        result = await gateway.create({"paymentMethodNonce": "fake"})

        assert isinstance(result.payment_method, UnknownPaymentMethod)
        assert result.payment_method.raw == {"somethingNew": {"token": "x"}}

    @pytest.mark.asyncio
    async def test_api_error_response_raises(self, gateway, transport):
        transport.queue({
            "apiErrorResponse": {
                "message": "Credit card number is invalid.",
                "errors": {"creditCard": {"errors": [{"code": "81715"}]}},
                "params": {"paymentMethod": {}},
            }
        })
        with pytest.raises(ApiValidationError) as exc_info:
            await gateway.create({"creditCard": {"number": "4111"}})
        assert exc_info.value.message == "Credit card number is invalid."
        assert exc_info.value.errors["creditCard"]["errors"][0]["code"] == "81715"

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, gateway, transport):
        transport.queue(ServerError())
        with pytest.raises(ServerError):
            await gateway.create({"creditCard": {}})


class TestFind:
    @pytest.mark.asyncio
    async def test_find_returns_variant_directly(self, gateway, transport):
        transport.queue({"venmoAccount": {"token": "venmo_1", "username": "venmojoe"}})
        result = await gateway.find("venmo_1")

        assert isinstance(result, VenmoAccount)
        assert result.username == "venmojoe"
        assert transport.calls[0].verb == "GET"
        assert transport.calls[0].path == f"{BASE}/any/venmo_1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "   ", None])
    async def test_blank_token(self, gateway, transport, token):
        with pytest.raises(NotFoundError):
            await gateway.find(token)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_not_found_from_api(self, gateway, transport):
        transport.queue(NotFoundError())
        with pytest.raises(NotFoundError):
            await gateway.find("missing")
        assert len(transport.calls) == 1


class TestBlankTokenGuards:
    @pytest.mark.asyncio
    async def test_update(self, gateway, transport):
        with pytest.raises(NotFoundError):
            await gateway.update("", {"makeDefault": True})
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_grant(self, gateway, transport):
        with pytest.raises(NotFoundError):
            await gateway.grant("", True)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_revoke(self, gateway, transport):
        with pytest.raises(NotFoundError):
            await gateway.revoke("  ")
        assert transport.calls == []

    def test_failure_is_deferred_until_awaited(self, gateway):
        """Calling without awaiting must not raise."""
        coro = gateway.find("")
        coro.close()


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update(self, gateway, transport, credit_card_payload):
        transport.queue(credit_card_payload)
        result = await gateway.update("cc_token_1", {"cardholderName": "New Name"})

        assert isinstance(result.payment_method, CreditCard)
        call = transport.calls[0]
        assert call.verb == "PUT"
        assert call.path == f"{BASE}/any/cc_token_1"
        assert call.body == {"paymentMethod": {"cardholderName": "New Name"}}


class TestGrantAndRevoke:
    @pytest.mark.asyncio
    async def test_grant_boolean_shorthand(self, gateway, transport):
        transport.queue({"paymentMethodNonce": {"nonce": "granted"}})
        transport.queue({"paymentMethodNonce": {"nonce": "granted"}})
        first = await gateway.grant("tok", True)
        await gateway.grant("tok", {"allowVaulting": True})

        assert transport.calls[0].body == transport.calls[1].body
        assert transport.calls[0].body == {
            "payment_method": {"sharedPaymentMethodToken": "tok", "allowVaulting": True},
        }
        assert transport.calls[0].path == f"{BASE}/grant"
        assert isinstance(first.payment_method_nonce, PaymentMethodNonce)
        assert first.payment_method is None

    @pytest.mark.asyncio
    async def test_grant_custom_fields(self, gateway, transport):
        await gateway.grant("tok", {"customField": "x"})
        assert transport.calls[0].body == {
            "payment_method": {"sharedPaymentMethodToken": "tok", "customField": "x"},
        }

    @pytest.mark.asyncio
    async def test_revoke(self, gateway, transport):
        transport.queue({"creditCard": {"token": "tok"}})
        result = await gateway.revoke("tok")

        assert isinstance(result.payment_method, CreditCard)
        call = transport.calls[0]
        assert call.verb == "POST"
        assert call.path == f"{BASE}/revoke"
        assert call.body == {"payment_method": {"sharedPaymentMethodToken": "tok"}}


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_with_revoke_all_grants(self, gateway, transport):
        result = await gateway.delete("tok", {"revokeAllGrants": True})

        assert result is None
        assert transport.calls[0].verb == "DELETE"
        assert transport.calls[0].path == f"{BASE}/any/tok?revoke_all_grants=true"

    @pytest.mark.asyncio
    async def test_delete_false_option(self, gateway, transport):
        await gateway.delete("tok", {"revokeAllGrants": False})
        assert transport.calls[0].path == f"{BASE}/any/tok?revoke_all_grants=false"

    @pytest.mark.asyncio
    async def test_delete_without_options(self, gateway, transport):
        await gateway.delete("tok")
        assert transport.calls[0].path == f"{BASE}/any/tok"

    @pytest.mark.asyncio
    async def test_invalid_option_sends_nothing(self, gateway, transport):
        with pytest.raises(InvalidKeysError):
            await gateway.delete("tok", {"bogus": 1})
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_blank_token(self, gateway, transport):
        with pytest.raises(NotFoundError):
            await gateway.delete(" ")
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_delete_error_propagates(self, gateway, transport):
        transport.queue(NotFoundError())
        with pytest.raises(NotFoundError):
            await gateway.delete("gone")

    @pytest.mark.asyncio
    async def test_token_is_percent_encoded(self, gateway, transport):
        await gateway.delete("to?k#x", {"revokeAllGrants": True})
        assert transport.calls[0].path == f"{BASE}/any/to%3Fk%23x?revoke_all_grants=true"


class TestTokenEncoding:
    @pytest.mark.asyncio
    async def test_find_and_update_encode_reserved_characters(self, gateway, transport):
        await gateway.find("a/b c")
        await gateway.update("a/b c", {"makeDefault": True})
        assert [call.path for call in transport.calls] == [
            f"{BASE}/any/a%2Fb%20c",
            f"{BASE}/any/a%2Fb%20c",
        ]


class TestMockTransportLatency:
    @pytest.mark.asyncio
    async def test_simulated_latency(self, settings):
        transport = MockTransport(default_response={"creditCard": {"token": "tok"}}, latency_ms=20)
        gateway = PaymentMethodGateway(transport, settings)

        started = time.perf_counter()
        card = await gateway.find("tok")
        elapsed = time.perf_counter() - started

        assert isinstance(card, CreditCard)
        assert elapsed >= 0.015
