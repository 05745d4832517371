"""Logging setup shared by library consumers."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from payplug_gateway.core.config import settings

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure root logger once per process."""
    handler = logging.StreamHandler(sys.stdout)

    if (log_format or settings.log_format) == "json":
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel((level or settings.log_level).upper())
