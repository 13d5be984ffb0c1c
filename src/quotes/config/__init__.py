"""
Configuration package for the Quotes client.

This package contains settings, .env loading and the ``env:NAME``
indirection used for the service URL and token.
"""

from .indirection import EnvRef, ConfigSource, parse_source, resolve_source
from .settings import (
    DEFAULT_SERVICE_URL,
    QuotesSettings,
    ResolvedConfig,
    get_settings,
    resolve_config,
)
from .env_loader import EnvFileLoader, load_env_with_hierarchy

__all__ = [
    "EnvRef",
    "ConfigSource",
    "parse_source",
    "resolve_source",
    "DEFAULT_SERVICE_URL",
    "QuotesSettings",
    "ResolvedConfig",
    "get_settings",
    "resolve_config",
    "EnvFileLoader",
    "load_env_with_hierarchy",
]
