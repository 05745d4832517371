"""PayPlug payment provider."""

from payplug_gateway.payments.providers.payplug.canonical import (
    CANONICAL_FIELDS,
    build_canonical_string,
    canonicalize,
    encode_params,
)
from payplug_gateway.payments.providers.payplug.notification import (
    SIGNATURE_HEADER,
    parse_notification,
    signature_from_headers,
    verify_or_raise,
    verify_signature,
)
from payplug_gateway.payments.providers.payplug.provider import PayplugProvider
from payplug_gateway.payments.providers.payplug.signature import (
    load_private_key,
    load_public_key,
    sign_payload,
)
from payplug_gateway.payments.providers.payplug.url import build_url

__all__ = [
    "CANONICAL_FIELDS",
    "SIGNATURE_HEADER",
    "PayplugProvider",
    "build_canonical_string",
    "build_url",
    "canonicalize",
    "encode_params",
    "load_private_key",
    "load_public_key",
    "parse_notification",
    "sign_payload",
    "signature_from_headers",
    "verify_or_raise",
    "verify_signature",
]
