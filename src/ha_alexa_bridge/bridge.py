"""
AsyncBridge / Bridge — forward one Alexa directive to Home Assistant.

handle() never raises: every failure is logged and returned as an Alexa
ErrorResponse that keeps the directive's correlation token.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.errors import AuthorizationError, BridgeError
from ha_alexa_bridge.log import directive_preview
from ha_alexa_bridge.models.envelope import Document, ErrorType
from ha_alexa_bridge.tokens import extract_token
from ha_alexa_bridge.transport.envelope import INTERNAL_ERROR_MESSAGE, build_error_response
from ha_alexa_bridge.transport.http import HttpClient

logger = logging.getLogger("ha_alexa_bridge.bridge")


class AsyncBridge:
    """Async directive bridge (primary)."""

    def __init__(self, config: BridgeConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.http = HttpClient(config, transport=transport)

    async def handle(self, directive: Document) -> Document:
        if self.config.debug:
            logger.info("Directive %s", directive_preview(directive))
        try:
            return await self.forward(directive)
        except AuthorizationError as e:
            logger.warning("Authorization failed: %s", e.message)
            return build_error_response(directive, ErrorType.INVALID_AUTHORIZATION_CREDENTIAL, e.message)
        except BridgeError as e:
            logger.error("%s: %s (details=%s)", e.code, e.message, e.details)
            return build_error_response(directive, ErrorType.INTERNAL_ERROR, e.message)
        except Exception:
            logger.exception("Unexpected failure forwarding directive")
            return build_error_response(directive, ErrorType.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

    async def forward(self, directive: Document) -> Document:
        """Forward the directive and return Home Assistant's response. Raises BridgeError."""
        url = self.http.endpoint_url()
        token = extract_token(directive, self.config)
        return await self.http.post(url, directive, token)


class Bridge:
    """Sync wrapper around AsyncBridge. Runs the event loop internally."""

    def __init__(self, config: BridgeConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._async = AsyncBridge(config, transport=transport)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> BridgeConfig:
        return self._async.config

    def handle(self, directive: Document) -> Document:
        return self._run(self._async.handle(directive))

    def close(self) -> None:
        self._loop.close()
