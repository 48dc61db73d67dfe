"""
ha-alexa-bridge — forward Alexa Smart Home directives to Home Assistant.

Extracts the account-linking token from a directive, POSTs the directive to
Home Assistant's /api/alexa/smart_home and returns the response unchanged.
"""

from ha_alexa_bridge.bridge import Bridge, AsyncBridge
from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.errors import (
    BridgeError,
    ConfigurationError,
    AuthorizationError,
    TransportError,
    ProtocolError,
)
from ha_alexa_bridge.models.envelope import ErrorType
from ha_alexa_bridge.tokens import extract_token, find_token

__version__ = "0.1.0"
__all__ = [
    "Bridge",
    "AsyncBridge",
    "BridgeConfig",
    "BridgeError",
    "ConfigurationError",
    "AuthorizationError",
    "TransportError",
    "ProtocolError",
    "ErrorType",
    "extract_token",
    "find_token",
]
