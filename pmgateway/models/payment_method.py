"""
Payment method variants returned by the gateway.

Every variant wraps the attribute mapping of its JSON sub-object. Instances
are immutable: the attributes are deep-copied at construction and exposed
read-only. Wrapped keys are reachable as attributes, by their wire name
(``card.cardType``) or its snake_case spelling (``card.card_type``).
"""

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional

from pmgateway.models.enums import PaymentMethodKind
from pmgateway.wire import to_camel_case


def _freeze(value: Any) -> Any:
    """Hashable snapshot of a JSON-like value."""
    if isinstance(value, Mapping):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class PaymentMethod:
    """
    Base class for every payment method variant.

    Variants subclass this without re-applying ``@dataclass``, so the
    ``__hash__`` below is the one every variant uses.
    """

    attributes: Mapping[str, Any]

    kind: ClassVar[PaymentMethodKind]

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(copy.deepcopy(dict(self.attributes))))

    def __hash__(self) -> int:
        return hash((type(self), _freeze(self.attributes)))

    def __reduce__(self):
        return (type(self), (dict(self.attributes),))

    def __deepcopy__(self, memo):
        # Construction already deep-copies the attributes.
        return type(self)(self.attributes)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "attributes":
            raise AttributeError(name)
        attributes = self.__dict__.get("attributes", {})
        for key in (name, to_camel_case(name)):
            if key in attributes:
                return attributes[key]
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    @property
    def token(self) -> Optional[str]:
        return self.attributes.get("token")

    @property
    def is_default(self) -> bool:
        return bool(self.attributes.get("default", False))


class _CardDetails(PaymentMethod):
    """Shared accessors for variants that carry card number details."""

    @property
    def masked_number(self) -> Optional[str]:
        bin_, last4 = self.attributes.get("bin"), self.attributes.get("last4")
        if not bin_ or not last4:
            return None
        return f"{bin_}******{last4}"

    @property
    def expiration_date(self) -> Optional[str]:
        month, year = self.attributes.get("expirationMonth"), self.attributes.get("expirationYear")
        if not month or not year:
            return None
        return f"{month}/{year}"


class CreditCard(_CardDetails):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.CREDIT_CARD


class PayPalAccount(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.PAYPAL_ACCOUNT


class ApplePayCard(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.APPLE_PAY_CARD


class AndroidPayCard(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.ANDROID_PAY_CARD

    @property
    def card_type(self) -> Optional[str]:
        return self.attributes.get("virtualCardType")

    @property
    def last4(self) -> Optional[str]:
        return self.attributes.get("virtualCardLast4")


class CoinbaseAccount(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.COINBASE_ACCOUNT


class PaymentMethodNonce(PaymentMethod):
    """Single-use reference to a payment method that is not vaulted yet."""

    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.PAYMENT_METHOD_NONCE

    @property
    def nonce(self) -> Optional[str]:
        return self.attributes.get("nonce")

    @property
    def consumed(self) -> bool:
        return bool(self.attributes.get("consumed", False))


class UsBankAccount(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.US_BANK_ACCOUNT


class VenmoAccount(PaymentMethod):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.VENMO_ACCOUNT


class VisaCheckoutCard(_CardDetails):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.VISA_CHECKOUT_CARD


class MasterpassCard(_CardDetails):
    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.MASTERPASS_CARD


UNKNOWN_IMAGE_URL = "https://assets.braintreegateway.com/payment_method_logo/unknown.png"


class UnknownPaymentMethod(PaymentMethod):
    """
    Fallback for payloads with no recognized variant key.

    Wraps the entire raw response rather than a sub-object, so nothing the
    API sent is lost when a new variant appears before the client knows it.
    """

    kind: ClassVar[PaymentMethodKind] = PaymentMethodKind.UNKNOWN

    @property
    def raw(self) -> Mapping[str, Any]:
        return self.attributes

    @property
    def image_url(self) -> str:
        return UNKNOWN_IMAGE_URL

    @property
    def token(self) -> Optional[str]:
        if "token" in self.attributes:
            return self.attributes["token"]
        # Single unrecognized sub-object, e.g. {"futureWallet": {"token": ...}}
        for value in self.attributes.values():
            if isinstance(value, Mapping) and "token" in value:
                return value["token"]
        return None
