"""
Application bootstrap.

``start`` is the process start hook: it loads the .env file, reads the
settings, configures logging and resolves the configuration once into
plain values before handing back a ready ``QuotesClient``.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from quotes.api.errors import ConfigurationError
from quotes.client import QuotesClient
from quotes.config.env_loader import EnvFileLoader
from quotes.config.settings import QuotesSettings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Set the level of the ``quotes`` logger hierarchy. Handlers are left to the application."""
    logging.getLogger("quotes").setLevel(level)


def load_settings(working_directory: Optional[Path] = None, **overrides: Any) -> QuotesSettings:
    """Load the .env file (if any) and build settings from the environment."""
    EnvFileLoader(working_directory).load_env_file()
    try:
        return get_settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"invalid value for {field}: {first['msg']}",
            config_field=field,
            original_error=e,
        ) from e


def start(
    working_directory: Optional[Path] = None,
    settings: Optional[QuotesSettings] = None,
    **overrides: Any,
) -> QuotesClient:
    """
    Start the client.

    Args:
        working_directory: Where to begin the .env search
        settings: Pre-built settings; skips .env loading when given
        **overrides: Settings fields that take precedence over the environment

    Returns:
        A QuotesClient bound to the resolved configuration
    """
    if settings is None:
        settings = load_settings(working_directory, **overrides)

    configure_logging(settings.effective_log_level)
    config = settings.resolve()
    logger.debug(f"Starting quotes client for {config.service_url}")
    return QuotesClient(config)
