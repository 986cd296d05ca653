"""
Client-side gateway for a payment processor's payment method API.

Create, find, update, grant, revoke and delete vaulted payment methods, with
responses resolved into typed payment method variants.
"""

from pmgateway.config import Settings, configure_logging
from pmgateway.errors import (
    ApiValidationError,
    GatewayError,
    InvalidKeysError,
    NotFoundError,
    TransportError,
)
from pmgateway.gateway import PaymentMethodGateway, parse_payment_method
from pmgateway.merchant import MerchantGateway
from pmgateway.models import (
    AndroidPayCard,
    ApplePayCard,
    CoinbaseAccount,
    CreditCard,
    MasterpassCard,
    PaymentMethod,
    PaymentMethodKind,
    PaymentMethodNonce,
    PayPalAccount,
    SuccessfulResult,
    UnknownPaymentMethod,
    UsBankAccount,
    VenmoAccount,
    VisaCheckoutCard,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "configure_logging",
    "GatewayError",
    "ApiValidationError",
    "InvalidKeysError",
    "NotFoundError",
    "TransportError",
    "MerchantGateway",
    "PaymentMethodGateway",
    "parse_payment_method",
    "PaymentMethod",
    "PaymentMethodKind",
    "CreditCard",
    "PayPalAccount",
    "ApplePayCard",
    "AndroidPayCard",
    "CoinbaseAccount",
    "PaymentMethodNonce",
    "UsBankAccount",
    "VenmoAccount",
    "VisaCheckoutCard",
    "MasterpassCard",
    "UnknownPaymentMethod",
    "SuccessfulResult",
]
