"""PayPlug payment provider implementation."""

import logging

from payplug_gateway.core.config import GatewayAccountConfig
from payplug_gateway.core.exceptions import UndefinedAccountParameterError
from payplug_gateway.payments.providers.base import PaymentProvider
from payplug_gateway.payments.providers.payplug.canonical import build_canonical_string
from payplug_gateway.payments.providers.payplug.notification import (
    parse_notification,
    verify_signature,
)
from payplug_gateway.payments.providers.payplug.signature import (
    PRIVATE_KEY_PARAMETER,
    load_private_key,
    sign_payload,
)
from payplug_gateway.payments.providers.payplug.url import BASE_URL_PARAMETER, build_url
from payplug_gateway.payments.schemas import IpnNotification, PaymentRequest

logger = logging.getLogger(__name__)


class PayplugProvider(PaymentProvider):
    """PayPlug payment provider.

    Holds only the read-only account config; safe to share between
    concurrent requests.
    """

    def __init__(self, config: GatewayAccountConfig) -> None:
        self.config = config

    @property
    def ipn_url(self) -> str | None:
        """Default IPN URL used when a payment has none."""
        return self.config.ipn_url

    def generate_payment_url(self, payment: PaymentRequest) -> str:
        """Generate PayPlug payment page URL.

        Raises:
            UndefinedAccountParameterError: If private key or base URL is missing
            ConfigurationError: If private key cannot be parsed
            SigningError: If signing fails
        """
        if not self.config.private_key:
            raise UndefinedAccountParameterError(PRIVATE_KEY_PARAMETER)

        if not self.config.base_url:
            raise UndefinedAccountParameterError(BASE_URL_PARAMETER)

        private_key = load_private_key(self.config.private_key)

        canonical = build_canonical_string(payment, self.ipn_url)
        signature = sign_payload(canonical, private_key)

        logger.info(
            "Payment URL generated: amount=%d, currency=%s, order=%s",
            payment.amount,
            payment.currency,
            payment.order,
        )

        return build_url(self.config.base_url, canonical, signature)

    def verify_notification(self, raw_body: bytes | str, signature: bytes | str | None) -> bool:
        """Verify IPN signature against PayPlug public key."""
        valid = verify_signature(raw_body, signature, self.config.public_key)
        if not valid:
            logger.warning("Invalid IPN signature")
        return valid

    def parse_notification(self, raw_body: bytes | str, signature: bytes | str | None) -> IpnNotification:
        return parse_notification(raw_body, signature, self.config.public_key)
