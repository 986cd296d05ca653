"""Client configuration via environment variables."""

import logging

from pydantic_settings import BaseSettings

from pmgateway.errors import ConfigurationError
from pmgateway.models.enums import Environment

ENVIRONMENT_URLS = {
    Environment.DEVELOPMENT: "http://localhost:3000",
    Environment.SANDBOX: "https://api.sandbox.braintreegateway.com:443",
    Environment.PRODUCTION: "https://api.braintreegateway.com:443",
}


class Settings(BaseSettings):
    environment: Environment = Environment.SANDBOX
    base_url: str = ""  # Overrides the environment URL when set
    merchant_id: str = ""
    public_key: str = ""
    private_key: str = ""
    api_version: str = "6"
    timeout_seconds: float = 60.0
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "PMGATEWAY_"}

    def api_base_url(self) -> str:
        return (self.base_url or ENVIRONMENT_URLS[self.environment]).rstrip("/")

    def base_merchant_path(self) -> str:
        """Merchant-scoped URL prefix every payment method path hangs off."""
        if not self.merchant_id.strip():
            raise ConfigurationError("merchant_id is not configured")
        return f"/merchants/{self.merchant_id.strip()}"


def configure_logging(level: str | None = None) -> None:
    """
    Root logging setup for scripts and services embedding the client.

    Call once at process start-up, before the first gateway call. Libraries
    importing ``pmgateway`` should leave this to the host application.
    Unknown level names fall back to INFO.
    """
    resolved = getattr(logging, (level or settings.log_level).upper(), None)
    logging.basicConfig(
        level=resolved if isinstance(resolved, int) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


settings = Settings()
