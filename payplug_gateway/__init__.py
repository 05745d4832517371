"""PayPlug redirect URL signing and IPN verification."""

__version__ = "1.0.0"
