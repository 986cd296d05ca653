from pmgateway.gateway.base import Gateway
from pmgateway.gateway.payment_method_gateway import PaymentMethodGateway
from pmgateway.gateway.resolver import VARIANTS, parse_payment_method

__all__ = ["Gateway", "PaymentMethodGateway", "VARIANTS", "parse_payment_method"]
