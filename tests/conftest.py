from typing import Any, Optional

import pytest

BRIDGE_ENV_VARS = (
    "BASE_URL",
    "DEBUG",
    "LONG_LIVED_ACCESS_TOKEN",
    "REQUEST_TIMEOUT",
    "USER_AGENT",
    "LOG_LEVEL",
    "NOT_VERIFY_SSL",
    "BRIDGE_ENV",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """BridgeConfig reads the process environment; start every test from a clean one."""
    for name in BRIDGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_directive(
    endpoint_token: Optional[Any] = None,
    scope_token: Optional[Any] = None,
    grantee_token: Optional[Any] = None,
    correlation_token: Optional[str] = "ct-42",
) -> dict[str, Any]:
    header: dict[str, Any] = {
        "namespace": "Alexa.PowerController",
        "name": "TurnOn",
        "messageId": "msg-0001",
        "payloadVersion": "3",
    }
    if correlation_token is not None:
        header["correlationToken"] = correlation_token
    directive: dict[str, Any] = {"header": header, "payload": {}}
    if endpoint_token is not None:
        directive["endpoint"] = {
            "scope": {"type": "BearerToken", "token": endpoint_token},
            "endpointId": "light#kitchen",
        }
    if scope_token is not None:
        directive["payload"]["scope"] = {"type": "BearerToken", "token": scope_token}
    if grantee_token is not None:
        directive["payload"]["grantee"] = {"type": "BearerToken", "token": grantee_token}
    return {"directive": directive}


@pytest.fixture
def directive_factory():
    return make_directive
