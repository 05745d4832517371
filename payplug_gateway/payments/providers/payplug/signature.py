"""PayPlug-compatible RSA-SHA1 signature utilities."""

from functools import lru_cache

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from payplug_gateway.core.exceptions import (
    ConfigurationError,
    SigningError,
    UndefinedAccountParameterError,
)

PRIVATE_KEY_PARAMETER = "payplug_account_yourPrivateKey"
PUBLIC_KEY_PARAMETER = "payplug_account_payplugPublicKey"


@lru_cache(maxsize=8)
def _parse_private_key(pem: str) -> RSAPrivateKey:
    try:
        key = serialization.load_pem_private_key(pem.encode(), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError(
            message="Private key is not a valid unencrypted PEM key",
            details={"parameter": PRIVATE_KEY_PARAMETER, "reason": str(e)},
        ) from e

    if not isinstance(key, RSAPrivateKey):
        raise SigningError(
            message="PayPlug requires an RSA private key",
            details={"key_type": type(key).__name__},
        )

    return key


@lru_cache(maxsize=8)
def _parse_public_key(pem: str) -> RSAPublicKey:
    data = pem.encode()
    try:
        if b"BEGIN CERTIFICATE" in data:
            key = x509.load_pem_x509_certificate(data).public_key()
        else:
            key = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError(
            message="Public key is not a valid PEM key or certificate",
            details={"parameter": PUBLIC_KEY_PARAMETER, "reason": str(e)},
        ) from e

    if not isinstance(key, RSAPublicKey):
        raise ConfigurationError(
            message="PayPlug public key must be an RSA key",
            details={"parameter": PUBLIC_KEY_PARAMETER, "key_type": type(key).__name__},
        )

    return key


def load_private_key(pem: str | None) -> RSAPrivateKey:
    """Parse merchant private key.

    Parsed keys are cached by PEM text and never mutated, so the same
    object is shared between threads.

    Raises:
        UndefinedAccountParameterError: If no key is configured
        ConfigurationError: If the PEM cannot be parsed
        SigningError: If the key is not an RSA key
    """
    if not pem:
        raise UndefinedAccountParameterError(PRIVATE_KEY_PARAMETER)
    return _parse_private_key(pem)


def load_public_key(pem: str | None) -> RSAPublicKey:
    """Parse PayPlug public key from a PEM key or X.509 certificate."""
    if not pem:
        raise UndefinedAccountParameterError(PUBLIC_KEY_PARAMETER)
    return _parse_public_key(pem)


def sign_payload(canonical: str, private_key: str | RSAPrivateKey | None) -> bytes:
    """Sign canonical query string.

    Formula: RSA-PKCS1v15(SHA1(utf8(canonical)))

    Args:
        canonical: Exact string that goes into the data parameter
        private_key: PEM text or already loaded key

    Returns:
        Raw signature bytes
    """
    key = private_key if isinstance(private_key, RSAPrivateKey) else load_private_key(private_key)

    try:
        return key.sign(canonical.encode("utf-8"), padding.PKCS1v15(), hashes.SHA1())
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(details={"reason": str(e)}) from e
