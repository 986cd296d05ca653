"""Enumerations for the payment method domain model."""

from enum import Enum


class PaymentMethodKind(str, Enum):
    """
    Top-level response keys that identify a payment method variant.

    Declaration order is the resolution priority: when a malformed payload
    carries several of these keys, the first one listed wins.
    """

    CREDIT_CARD = "creditCard"
    PAYPAL_ACCOUNT = "paypalAccount"
    APPLE_PAY_CARD = "applePayCard"
    ANDROID_PAY_CARD = "androidPayCard"
    COINBASE_ACCOUNT = "coinbaseAccount"
    PAYMENT_METHOD_NONCE = "paymentMethodNonce"
    US_BANK_ACCOUNT = "usBankAccount"
    VENMO_ACCOUNT = "venmoAccount"
    VISA_CHECKOUT_CARD = "visaCheckoutCard"
    MASTERPASS_CARD = "masterpassCard"
    UNKNOWN = "unknown"


class Environment(str, Enum):
    """Processor environments with a known API host."""

    DEVELOPMENT = "development"
    SANDBOX = "sandbox"
    PRODUCTION = "production"
