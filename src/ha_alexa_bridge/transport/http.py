"""
HTTP client for Home Assistant's Alexa smart home API.

One POST per directive, bounded by BridgeConfig.timeout end to end.
"""

import asyncio
import json
import logging
import time
from typing import Optional

import httpx

from ha_alexa_bridge.config import BridgeConfig
from ha_alexa_bridge.errors import AuthorizationError, ConfigurationError, ProtocolError, TransportError
from ha_alexa_bridge.log import redact_headers
from ha_alexa_bridge.models.envelope import Document

SMART_HOME_PATH = "/api/alexa/smart_home"
BODY_EXCERPT_CHARS = 200

logger = logging.getLogger("ha_alexa_bridge.transport.http")


class HttpClient:
    def __init__(self, config: BridgeConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    def endpoint_url(self) -> str:
        base_url = self._config.base_url.strip().rstrip("/")
        if not base_url:
            raise ConfigurationError("BASE_URL is not configured")
        return f"{base_url}{SMART_HOME_PATH}"

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }

    async def post(self, url: str, directive: Document, token: str) -> Document:
        headers = self._headers(token)
        body = json.dumps(directive).encode("utf-8")
        if self._config.debug:
            logger.info("POST %s headers=%s size=%d bytes", url, redact_headers(headers), len(body))

        started = time.monotonic()
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                resp = await asyncio.wait_for(
                    client.post(url, content=body, headers=headers),
                    timeout=self._config.timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise TransportError(f"Home Assistant did not answer within {self._config.timeout}s") from e
        except httpx.TransportError as e:
            raise TransportError(f"Could not reach Home Assistant: {type(e).__name__}") from e

        if self._config.debug:
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.info("HTTP %d in %.1f ms, %d bytes", resp.status_code, elapsed_ms, len(resp.content))
        return self._parse(resp)

    @staticmethod
    def _parse(resp: httpx.Response) -> Document:
        status = resp.status_code
        excerpt = resp.text[:BODY_EXCERPT_CHARS]
        details = {"status": status, "body": excerpt}
        if status in (401, 403):
            raise AuthorizationError(f"HTTP {status}: {excerpt}", details=details)
        if not 200 <= status < 300:
            raise ProtocolError(f"HTTP {status}: {excerpt}", details=details)
        try:
            data = resp.json()
        except ValueError as e:
            raise ProtocolError("Home Assistant returned malformed JSON", details=details) from e
        if not isinstance(data, dict):
            raise ProtocolError("Home Assistant response is not a JSON object", details=details)
        return data
