"""
Merchant-scoped entry point.

Wires settings, an HTTP transport and the resource gateways together:

    async with MerchantGateway(Settings(merchant_id="m_123", ...)) as gateway:
        card = await gateway.payment_method.find("token")
"""

from typing import Optional

from pmgateway.config import Settings, settings as default_settings
from pmgateway.gateway.payment_method_gateway import PaymentMethodGateway
from pmgateway.transport.base import HttpTransport
from pmgateway.transport.httpx_transport import HttpxTransport


class MerchantGateway:
    """Owns the transport and exposes one gateway per API resource."""

    def __init__(self, config: Optional[Settings] = None, http: Optional[HttpTransport] = None):
        self.config = config or default_settings
        self.http = http or HttpxTransport(self.config)
        self.payment_method = PaymentMethodGateway(self.http, self.config)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "MerchantGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
