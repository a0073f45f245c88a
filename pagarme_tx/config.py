"""Configuration management for pagarme-tx."""

from dataclasses import dataclass, field

from pagarme_tx.exceptions import ConfigurationError
from pagarme_tx.models.enums import AuthenticationMethod

DEFAULT_BASE_URL = "https://api.pagar.me/1"


@dataclass
class GatewayConfig:
    """Gateway connection configuration."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = field(default="", repr=False)
    timeout: float = 30.0
    auth_method: AuthenticationMethod = AuthenticationMethod.BODY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Create config from environment variables."""
        import os

        auth_method = os.getenv("PAGARME_AUTH_METHOD", AuthenticationMethod.BODY.value)
        try:
            auth = AuthenticationMethod(auth_method.lower())
        except ValueError:
            raise ConfigurationError(f"Unknown PAGARME_AUTH_METHOD: {auth_method}") from None

        timeout = os.getenv("PAGARME_TIMEOUT", "30")
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ConfigurationError(f"Invalid PAGARME_TIMEOUT: {timeout}") from None

        return cls(
            base_url=os.getenv("PAGARME_BASE_URL", DEFAULT_BASE_URL),
            api_key=os.getenv("PAGARME_API_KEY", ""),
            timeout=timeout_seconds,
            auth_method=auth,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
