"""
Bearer token lookup.

Each accessor reads one fixed location of the directive and returns the token
there, or None. Accessors are tried in TOKEN_ACCESSORS order; the first
non-empty string wins. The static fallback token is consulted last, and only
when BridgeConfig.fallback_enabled allows it.
"""

import logging
from typing import Any, Callable, Optional

from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.errors import AuthorizationError
from ha_alexa_bridge.models.envelope import Document

TokenAccessor = Callable[[Document], Optional[str]]

logger = logging.getLogger("ha_alexa_bridge.tokens")


def _child(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key)
    return None


def _token(node: Any) -> Optional[str]:
    value = _child(node, "token")
    if isinstance(value, str) and value:
        return value
    return None


def endpoint_scope_token(directive: Document) -> Optional[str]:
    """directive.endpoint.scope.token: control and state report directives."""
    endpoint = _child(_child(directive, "directive"), "endpoint")
    return _token(_child(endpoint, "scope"))


def payload_scope_token(directive: Document) -> Optional[str]:
    """directive.payload.scope.token: discovery."""
    payload = _child(_child(directive, "directive"), "payload")
    return _token(_child(payload, "scope"))


def payload_grantee_token(directive: Document) -> Optional[str]:
    """directive.payload.grantee.token: Alexa.Authorization AcceptGrant."""
    payload = _child(_child(directive, "directive"), "payload")
    return _token(_child(payload, "grantee"))


TOKEN_ACCESSORS: tuple[TokenAccessor, ...] = (
    endpoint_scope_token,
    payload_scope_token,
    payload_grantee_token,
)


def find_token(directive: Document, config: Optional[BridgeConfig] = None) -> Optional[str]:
    for accessor in TOKEN_ACCESSORS:
        token = accessor(directive)
        if token:
            return token

    if config is None or not config.debug or not config.fallback_token:
        return None
    if not config.fallback_enabled:
        logger.warning("Fallback token ignored: DEBUG is on but BRIDGE_ENV is %r", config.environment)
        return None
    logger.warning("No token in directive, using fallback token (BRIDGE_ENV=%s)", config.environment)
    return config.fallback_token


def extract_token(directive: Document, config: Optional[BridgeConfig] = None) -> str:
    token = find_token(directive, config)
    if token is None:
        raise AuthorizationError("No authorization token found in directive")
    return token
