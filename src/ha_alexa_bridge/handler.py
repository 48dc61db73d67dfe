"""
Cloud function entry point: ``ha_alexa_bridge.handler.lambda_handler``.

Environment:
  BASE_URL                 Home Assistant URL, e.g. https://ha.example.com (required)
  DEBUG                    log directive previews, headers and latency
  LONG_LIVED_ACCESS_TOKEN  fallback token, DEBUG only and never in production
  BRIDGE_ENV               deployment name, defaults to "production"
  REQUEST_TIMEOUT          outbound timeout in seconds, default 6
  NOT_VERIFY_SSL           skip TLS verification for self-signed certificates
  USER_AGENT, LOG_LEVEL
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from ha_alexa_bridge.bridge import Bridge
from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.log import configure_logging
from ha_alexa_bridge.models.envelope import Document, ErrorType
from ha_alexa_bridge.transport.envelope import build_error_response

logger = logging.getLogger("ha_alexa_bridge.handler")

_bridge: Optional[Bridge] = None


def get_bridge() -> Bridge:
    """Build the process-wide bridge on first use."""
    global _bridge
    if _bridge is None:
        config = BridgeConfig.from_env()
        configure_logging(config.effective_log_level)
        _bridge = Bridge(config)
    return _bridge


def lambda_handler(event: Document, context: Any) -> Document:
    try:
        bridge = get_bridge()
    except ValidationError as e:
        logger.error("Invalid bridge configuration: %s", e)
        return build_error_response(event, ErrorType.INTERNAL_ERROR, "Bridge is misconfigured")
    return bridge.handle(event)
