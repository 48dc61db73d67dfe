"""
Bridge error types — one class per failure cause.

Every error is caught at the bridge boundary and turned into an Alexa
ErrorResponse; only AuthorizationError maps to an authorization-specific kind.
"""

from typing import Any, Optional


class BridgeError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ConfigurationError(BridgeError):
    def __init__(self, message: str):
        super().__init__("configuration_error", message)


class AuthorizationError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("authorization_error", message, details)


class TransportError(BridgeError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)


class ProtocolError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("protocol_error", message, details)
