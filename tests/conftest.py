"""Pytest fixtures for PayPlug signing and IPN scenarios."""

import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from payplug_gateway.core.config import GatewayAccountConfig
from payplug_gateway.payments.providers.payplug import PayplugProvider
from payplug_gateway.payments.schemas import PaymentRequest

BASE_URL = "https://pay.example/checkout"
DEFAULT_IPN_URL = "https://shop.example/payplug_ipn"


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    """Merchant key pair, generated once per run."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def public_pem(rsa_key) -> str:
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture
def account_config(private_pem, public_pem) -> GatewayAccountConfig:
    return GatewayAccountConfig(
        base_url=BASE_URL,
        private_key=private_pem,
        public_key=public_pem,
        ipn_url=DEFAULT_IPN_URL,
    )


@pytest.fixture
def provider(account_config) -> PayplugProvider:
    return PayplugProvider(account_config)


@pytest.fixture
def payment() -> PaymentRequest:
    return PaymentRequest(
        amount=1000,
        currency="EUR",
        return_url="https://shop.example/return",
        cancel_url="https://shop.example/cancel",
        email="a@b.com",
        first_name="Ada",
        last_name="Lovelace",
        customer="42",
        order="order-1001",
        custom_data="cart=7",
        origin="shop",
    )


@pytest.fixture
def gateway_sign(rsa_key):
    """Sign an IPN body the way the gateway does."""

    def _sign(body: bytes) -> str:
        signature = rsa_key.sign(body, padding.PKCS1v15(), hashes.SHA1())
        return base64.b64encode(signature).decode()

    return _sign
