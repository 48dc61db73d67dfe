"""
Bridge configuration.

Read once from the environment at process start and passed into the bridge.
The settings object is frozen; nothing mutates it for the lifetime of the process.
"""

import logging
from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_S = 6.0
DEFAULT_USER_AGENT = "ha-alexa-bridge/0.1.0"
PRODUCTION = "production"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class BridgeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        frozen=True,
        populate_by_name=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    base_url: str = Field(default="", validation_alias="BASE_URL")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    fallback_token: Optional[str] = Field(default=None, validation_alias="LONG_LIVED_ACCESS_TOKEN")
    timeout: float = Field(default=DEFAULT_TIMEOUT_S, gt=0, validation_alias="REQUEST_TIMEOUT")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="USER_AGENT")
    log_level: LogLevel = Field(default="INFO", validation_alias="LOG_LEVEL")
    not_verify_ssl: bool = Field(default=False, validation_alias="NOT_VERIFY_SSL")
    environment: str = Field(default=PRODUCTION, validation_alias="BRIDGE_ENV")

    @field_validator("base_url", "environment", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("environment")
    @classmethod
    def _lower(cls, value: str) -> str:
        return value.lower() or PRODUCTION

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def verify_ssl(self) -> bool:
        return not self.not_verify_ssl

    @property
    def fallback_enabled(self) -> bool:
        """True when a directive without a token may use the static fallback token."""
        return self.debug and bool(self.fallback_token) and self.environment != PRODUCTION

    @property
    def effective_log_level(self) -> str:
        """LOG_LEVEL, lowered to INFO in debug mode so diagnostics are never filtered out."""
        if self.debug and logging.getLevelName(self.log_level) > logging.INFO:
            return "INFO"
        return self.log_level

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        return cls()

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump()
        if data["fallback_token"]:
            data["fallback_token"] = "<redacted>"
        data["verify_ssl"] = self.verify_ssl
        data["fallback_enabled"] = self.fallback_enabled
        return data
