"""PayPlug IPN verification and parsing."""

import base64
import binascii
import json
import logging
from collections.abc import Mapping

import pydantic
from cryptography.exceptions import InvalidSignature as CryptoInvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from payplug_gateway.core.exceptions import InvalidSignature, NotificationError
from payplug_gateway.payments.providers.payplug.signature import load_public_key
from payplug_gateway.payments.schemas import IpnNotification

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "PayPlug-Signature"


def signature_from_headers(headers: Mapping[str, str]) -> str | None:
    """Find IPN signature header, ignoring header name case."""
    wanted = SIGNATURE_HEADER.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            return value
    return None


def verify_signature(
    raw_body: bytes | str,
    signature: bytes | str | None,
    public_key: str | RSAPublicKey | None,
) -> bool:
    """Verify IPN signature.

    Args:
        raw_body: Request body exactly as received
        signature: Base64 signature from the PayPlug-Signature header
        public_key: PayPlug public key (PEM text or loaded key)

    Returns:
        True if signature is valid

    Raises:
        ConfigurationError: If the public key is missing or unparsable
    """
    key = public_key if isinstance(public_key, RSAPublicKey) else load_public_key(public_key)

    if not signature:
        return False

    try:
        signature_bytes = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return False

    body = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body

    try:
        key.verify(signature_bytes, body, padding.PKCS1v15(), hashes.SHA1())
    except CryptoInvalidSignature:
        return False

    return True


def verify_or_raise(
    raw_body: bytes | str,
    signature: bytes | str | None,
    public_key: str | RSAPublicKey | None,
) -> None:
    """Verify IPN signature, raising InvalidSignature on mismatch."""
    if not verify_signature(raw_body, signature, public_key):
        logger.warning("Rejected IPN with invalid signature: body_length=%d", len(raw_body))
        raise InvalidSignature(details={"has_signature": bool(signature)})


def parse_notification(
    raw_body: bytes | str,
    signature: bytes | str | None,
    public_key: str | RSAPublicKey | None,
) -> IpnNotification:
    """Verify and parse IPN body.

    The body is only decoded after the signature check passes.

    Raises:
        InvalidSignature: If signature does not match
        NotificationError: If verified body is not a valid IPN document
    """
    verify_or_raise(raw_body, signature, public_key)

    try:
        payload = json.loads(raw_body)
    except ValueError as e:
        raise NotificationError(details={"reason": str(e)}) from e

    if not isinstance(payload, dict):
        raise NotificationError(details={"reason": "IPN body must be a JSON object"})

    try:
        notification = IpnNotification.model_validate(payload)
    except pydantic.ValidationError as e:
        raise NotificationError(details={"errors": e.errors(include_url=False)}) from e

    logger.info(
        "IPN verified: transaction=%d, state=%s, order=%s",
        notification.id_transaction,
        notification.state.value,
        notification.order,
    )

    return notification
