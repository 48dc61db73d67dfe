"""
Logging setup and diagnostic previews.

Everything here goes to the ``ha_alexa_bridge`` logger, never into a response.
Credentials are redacted and correlation tokens truncated before logging.
"""

import logging
import sys
from typing import Any, Mapping, Optional, TextIO

from ha_alexa_bridge.transport.envelope import directive_header

LOGGER_NAME = "ha_alexa_bridge"
REDACTED = "<redacted>"
PREVIEW_CHARS = 8

_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stream handler (stdout by default) to the bridge logger."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    target = stream or sys.stdout
    if _handler is None:
        _handler = logging.StreamHandler(stream=target)
        _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(_handler)
    else:
        _handler.setStream(target)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def truncate(value: Optional[str], chars: int = PREVIEW_CHARS) -> Optional[str]:
    if value is None or len(value) <= chars:
        return value
    return f"{value[:chars]}..."


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of outbound headers with the bearer credential replaced."""
    redacted = dict(headers)
    for key in redacted:
        if key.lower() == "authorization":
            redacted[key] = f"Bearer {REDACTED}"
    return redacted


def directive_preview(directive: Any) -> dict[str, Any]:
    """Shallow view of directive.header for debug logs."""
    header = directive_header(directive)
    token = header.get("correlationToken")
    return {
        "namespace": header.get("namespace"),
        "name": header.get("name"),
        "messageId": header.get("messageId"),
        "correlationToken": truncate(token) if isinstance(token, str) else None,
    }
