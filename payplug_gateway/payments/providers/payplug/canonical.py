"""Canonical encoding of PayPlug payment parameters."""

from urllib.parse import urlencode

from payplug_gateway.payments.schemas import PaymentRequest

# Signed as encoded, so the order is part of the protocol
CANONICAL_FIELDS: tuple[str, ...] = (
    "amount",
    "currency",
    "ipn_url",
    "return_url",
    "cancel_url",
    "email",
    "first_name",
    "last_name",
    "customer",
    "order",
    "custom_data",
    "origin",
)


def canonicalize(
    payment: PaymentRequest,
    fallback_ipn_url: str | None = None,
) -> list[tuple[str, str | int | None]]:
    """Convert payment to ordered key/value pairs.

    All fields are always present, in CANONICAL_FIELDS order.
    An empty or missing ipn_url is replaced by fallback_ipn_url.
    """
    pairs: list[tuple[str, str | int | None]] = []

    for field in CANONICAL_FIELDS:
        value = getattr(payment, field)
        if field == "ipn_url":
            value = value or fallback_ipn_url
        pairs.append((field, value))

    return pairs


def encode_params(pairs: list[tuple[str, str | int | None]]) -> str:
    """Form-encode pairs into a query string.

    Pairs with None are left out; empty strings stay as "key=".
    """
    return urlencode([(key, value) for key, value in pairs if value is not None])


def build_canonical_string(payment: PaymentRequest, fallback_ipn_url: str | None = None) -> str:
    return encode_params(canonicalize(payment, fallback_ipn_url))
