"""Base payment provider interface."""

from abc import ABC, abstractmethod

from payplug_gateway.payments.schemas import IpnNotification, PaymentRequest


class PaymentProvider(ABC):
    """Abstract base class for payment providers."""

    @abstractmethod
    def generate_payment_url(self, payment: PaymentRequest) -> str:
        """Generate redirect URL for payment initiation.

        Args:
            payment: Payment to initiate

        Returns:
            URL to redirect customer for payment
        """

    @abstractmethod
    def verify_notification(self, raw_body: bytes | str, signature: bytes | str | None) -> bool:
        """Verify IPN callback signature.

        Args:
            raw_body: Request body exactly as received
            signature: Signature sent alongside the body

        Returns:
            True if signature is valid
        """

    @abstractmethod
    def parse_notification(self, raw_body: bytes | str, signature: bytes | str | None) -> IpnNotification:
        """Verify and parse incoming IPN to unified format.

        Args:
            raw_body: Request body exactly as received
            signature: Signature sent alongside the body

        Returns:
            Parsed notification, only if authentic
        """
