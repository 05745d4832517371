"""Payment providers module."""

from payplug_gateway.core.config import GatewayAccountConfig
from payplug_gateway.payments.providers.base import PaymentProvider


def get_payment_provider(config: GatewayAccountConfig | None = None) -> PaymentProvider:
    """Factory function to get configured payment provider.

    Uses account settings from environment when no config is given.
    """
    from payplug_gateway.core.config import settings
    from payplug_gateway.payments.providers.payplug.provider import PayplugProvider

    return PayplugProvider(config or settings.account_config())


__all__ = [
    "PaymentProvider",
    "get_payment_provider",
]
