"""
Payment method variant resolution.

Picks the concrete variant for a response payload from key presence alone.
Keys are checked in ``PaymentMethodKind`` declaration order and the first
key holding an object wins:

  creditCard → paypalAccount → applePayCard → androidPayCard →
  coinbaseAccount → paymentMethodNonce → usBankAccount → venmoAccount →
  visaCheckoutCard → masterpassCard

Real responses carry exactly one of these keys, so the order only matters for
malformed payloads. Anything unmatched degrades to UnknownPaymentMethod
wrapping the whole payload; it is never an error.
"""

from typing import Any, Mapping, Optional

from pmgateway.models.enums import PaymentMethodKind
from pmgateway.models.payment_method import (
    AndroidPayCard,
    ApplePayCard,
    CoinbaseAccount,
    CreditCard,
    MasterpassCard,
    PaymentMethod,
    PaymentMethodNonce,
    PayPalAccount,
    UnknownPaymentMethod,
    UsBankAccount,
    VenmoAccount,
    VisaCheckoutCard,
)

VARIANTS: tuple[tuple[PaymentMethodKind, type[PaymentMethod]], ...] = (
    (PaymentMethodKind.CREDIT_CARD, CreditCard),
    (PaymentMethodKind.PAYPAL_ACCOUNT, PayPalAccount),
    (PaymentMethodKind.APPLE_PAY_CARD, ApplePayCard),
    (PaymentMethodKind.ANDROID_PAY_CARD, AndroidPayCard),
    (PaymentMethodKind.COINBASE_ACCOUNT, CoinbaseAccount),
    (PaymentMethodKind.PAYMENT_METHOD_NONCE, PaymentMethodNonce),
    (PaymentMethodKind.US_BANK_ACCOUNT, UsBankAccount),
    (PaymentMethodKind.VENMO_ACCOUNT, VenmoAccount),
    (PaymentMethodKind.VISA_CHECKOUT_CARD, VisaCheckoutCard),
    (PaymentMethodKind.MASTERPASS_CARD, MasterpassCard),
)


def sub_object(response: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    """Return ``response[key]`` if it is a nested object, else None."""
    value = response.get(key)
    return value if isinstance(value, Mapping) else None


def parse_payment_method(response: Mapping[str, Any]) -> PaymentMethod:
    """
    Build the payment method variant a response payload represents.

    Args:
        response: Flat JSON object, e.g. ``{"creditCard": {"token": "abc"}}``.

    Returns:
        The first matching variant built from its sub-object, or
        UnknownPaymentMethod wrapping ``response`` itself.
    """
    for kind, variant in VARIANTS:
        attributes = sub_object(response, kind.value)
        if attributes is not None:
            return variant(attributes)
    return UnknownPaymentMethod(response)
