"""
Configuration settings for the Quotes client.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files. Values may point
at another environment variable with the ``env:NAME`` marker; they are
resolved once, into a ``ResolvedConfig``, when a client is built.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quotes.config.indirection import ConfigSource, resolve_source

DEFAULT_SERVICE_URL = "http://quotes.rest"


class QuotesSettings(BaseSettings):
    """
    Main configuration settings for the Quotes client.

    Settings are loaded from multiple sources in order of preference:
    1. Explicit keyword arguments
    2. Environment variables (prefixed with QUOTES_)
    3. The .env file in the working directory
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="QUOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service Configuration
    service_url: Optional[str] = Field(
        default=None,
        description="Base URL of the quotes service, or env:NAME"
    )

    token: Optional[str] = Field(
        default=None,
        description="Bearer token for the quotes service, or env:NAME"
    )

    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
        gt=0
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @field_validator("service_url")
    @classmethod
    def validate_service_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate the service URL when given literally."""
        if v is None or v.startswith("env:"):
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid service URL '{v}'. Expected an http:// or https:// URL")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def resolve(self, environ: Optional[Mapping[str, str]] = None) -> "ResolvedConfig":
        """Resolve indirections into plain values."""
        return resolve_config(
            service_url=self.service_url,
            token=self.token,
            timeout=self.timeout,
            environ=environ,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary, excluding sensitive data."""
        data = self.model_dump()
        # Mask sensitive data
        if data.get("token") and not data["token"].startswith("env:"):
            data["token"] = "***masked***"
        return data


@dataclass(frozen=True)
class ResolvedConfig:
    """Plain configuration values used by the transport."""
    service_url: str = DEFAULT_SERVICE_URL
    token: str = ""
    timeout: float = 30.0


def resolve_config(
    service_url: ConfigSource = None,
    token: ConfigSource = None,
    timeout: float = 30.0,
    environ: Optional[Mapping[str, str]] = None,
) -> ResolvedConfig:
    """
    Build a ResolvedConfig from possibly indirect values.

    An unset service URL (or one pointing at a missing variable) falls back
    to DEFAULT_SERVICE_URL; an unresolved token becomes the empty string.
    """
    return ResolvedConfig(
        service_url=resolve_source(service_url, DEFAULT_SERVICE_URL, environ) or DEFAULT_SERVICE_URL,
        token=resolve_source(token, "", environ) or "",
        timeout=timeout,
    )


def get_settings(**overrides: Any) -> QuotesSettings:
    """Get the current Quotes settings."""
    return QuotesSettings(**overrides)
