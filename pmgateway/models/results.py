"""Success envelope returned by create/update/grant/revoke."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pmgateway.models.payment_method import PaymentMethod, PaymentMethodNonce


@dataclass(frozen=True)
class SuccessfulResult:
    """
    Result of a mutating payment method call.

    Exactly one of ``payment_method`` / ``payment_method_nonce`` is set once
    the payment method response handler has run. ``resources`` holds the
    objects built by the generic handler, keyed by response key.
    """

    resources: Mapping[str, Any] = field(default_factory=dict)
    payment_method: Optional[PaymentMethod] = None
    payment_method_nonce: Optional[PaymentMethodNonce] = None
    success: bool = True
