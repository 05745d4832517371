"""Payment processing module."""

from payplug_gateway.payments.providers import get_payment_provider
from payplug_gateway.payments.schemas import IpnNotification, IpnState, PaymentRequest

__all__ = [
    "IpnNotification",
    "IpnState",
    "PaymentRequest",
    "get_payment_provider",
]
