from pmgateway.models.enums import Environment, PaymentMethodKind
from pmgateway.models.options import DeleteOptions, build_grant_options
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
from pmgateway.models.results import SuccessfulResult

__all__ = [
    "Environment",
    "PaymentMethodKind",
    "DeleteOptions",
    "build_grant_options",
    "PaymentMethod",
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
