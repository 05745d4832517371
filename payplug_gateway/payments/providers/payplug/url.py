"""Redirect URL assembly."""

import base64
from urllib.parse import quote_plus

from payplug_gateway.core.exceptions import UndefinedAccountParameterError

BASE_URL_PARAMETER = "payplug_account_url"


def encode_param(raw: bytes) -> str:
    """Base64-encode then percent-encode for embedding in a URL."""
    return quote_plus(base64.b64encode(raw).decode("ascii"))


def build_url(base_url: str | None, canonical: str, signature: bytes) -> str:
    """Build PayPlug redirect URL.

    Format: {base_url}?data={data}&sign={sign}

    Raises:
        UndefinedAccountParameterError: If base_url is empty
    """
    if not base_url:
        raise UndefinedAccountParameterError(BASE_URL_PARAMETER)

    data = encode_param(canonical.encode("utf-8"))
    sign = encode_param(signature)

    return f"{base_url}?data={data}&sign={sign}"
