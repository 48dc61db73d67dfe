"""
Error envelope construction and directive header lookup.
"""

import uuid
from typing import Any, Optional

from ha_alexa_bridge.models.envelope import (
    Document,
    ErrorEvent,
    ErrorHeader,
    ErrorPayload,
    ErrorResponse,
)

INTERNAL_ERROR_MESSAGE = "Internal error while forwarding the directive"


def directive_header(directive: Any) -> Document:
    """Return directive.header, or an empty dict when the envelope has none."""
    if not isinstance(directive, dict):
        return {}
    inner = directive.get("directive")
    if not isinstance(inner, dict):
        return {}
    header = inner.get("header")
    return header if isinstance(header, dict) else {}


def correlation_token(directive: Any) -> Optional[str]:
    token = directive_header(directive).get("correlationToken")
    if isinstance(token, str) and token:
        return token
    return None


def build_error_response(directive: Any, error_type: str, message: str) -> Document:
    """Build an Alexa ErrorResponse, carrying over the directive's correlation token."""
    response = ErrorResponse(
        event=ErrorEvent(
            header=ErrorHeader(
                messageId=str(uuid.uuid4()),
                correlationToken=correlation_token(directive),
            ),
            payload=ErrorPayload(type=error_type, message=message),
        ),
    )
    return response.model_dump(exclude_none=True)


def is_error_response(response: Any) -> bool:
    if not isinstance(response, dict):
        return False
    event = response.get("event")
    header = event.get("header") if isinstance(event, dict) else None
    return isinstance(header, dict) and header.get("name") == "ErrorResponse"
