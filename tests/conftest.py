"""Shared test fixtures."""

import pytest

from pmgateway.config import Settings
from pmgateway.gateway.payment_method_gateway import PaymentMethodGateway
from pmgateway.transport.mock_transport import MockTransport


@pytest.fixture
def settings():
    return Settings(
        environment="sandbox",
        merchant_id="merchant_123",
        public_key="public_key",
        private_key="private_key",
    )


@pytest.fixture
def transport():
    return MockTransport()


@pytest.fixture
def gateway(transport, settings):
    return PaymentMethodGateway(transport, settings)


@pytest.fixture
def credit_card_payload():
    return {
        "creditCard": {
            "token": "cc_token_1",
            "bin": "411111",
            "last4": "1111",
            "expirationMonth": "12",
            "expirationYear": "2030",
            "cardType": "Visa",
            "default": True,
        }
    }
