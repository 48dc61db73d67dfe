"""
Alexa Smart Home envelope models.

Inbound directives are kept as plain documents; only the synthesized
ErrorResponse is modelled.
"""

from typing import Any, Optional
from pydantic import BaseModel

Document = dict[str, Any]

PAYLOAD_VERSION = "3"


class ErrorType:
    INVALID_AUTHORIZATION_CREDENTIAL = "INVALID_AUTHORIZATION_CREDENTIAL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorHeader(BaseModel):
    namespace: str = "Alexa"
    name: str = "ErrorResponse"
    messageId: str
    payloadVersion: str = PAYLOAD_VERSION
    correlationToken: Optional[str] = None


class ErrorPayload(BaseModel):
    type: str
    message: str


class ErrorEvent(BaseModel):
    header: ErrorHeader
    payload: ErrorPayload


class ErrorResponse(BaseModel):
    event: ErrorEvent
