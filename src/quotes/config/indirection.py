"""
Configuration value indirection.

A configured value is either given directly or names an environment variable
to read it from. Strings of the form ``env:NAME`` are parsed into an
``EnvRef``; everything else is taken literally.
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from quotes.api.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_MARKER_PREFIX = "env:"


@dataclass(frozen=True)
class EnvRef:
    """A configuration value that lives in the named environment variable."""
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ConfigurationError(
                "Environment indirection requires a variable name",
                config_field="env_ref",
            )

    def lookup(self, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        env = os.environ if environ is None else environ
        return env.get(self.name)


ConfigSource = Union[str, EnvRef, None]


def parse_source(raw: ConfigSource) -> ConfigSource:
    """
    Turn a raw configured value into a ConfigSource.

    Examples:
        >>> parse_source("env:QUOTES_URL")
        EnvRef(name='QUOTES_URL')
        >>> parse_source("http://localhost:4000")
        'http://localhost:4000'
    """
    if isinstance(raw, str) and raw.startswith(ENV_MARKER_PREFIX):
        return EnvRef(raw[len(ENV_MARKER_PREFIX):].strip())
    return raw


def resolve_source(
    source: ConfigSource,
    default: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Resolve a ConfigSource to a plain value.

    Args:
        source: Literal value, string marker or EnvRef
        default: Returned when nothing is configured or the variable is unset
        environ: Environment mapping to read from (defaults to os.environ)

    Returns:
        The resolved value, or ``default``
    """
    source = parse_source(source)

    if source is None:
        return default

    if isinstance(source, EnvRef):
        value = source.lookup(environ)
        if value is None:
            logger.debug(f"Environment variable {source.name} is not set, using default")
            return default
        return value

    return source
