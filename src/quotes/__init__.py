"""
Quotes - a client library for the quote-of-the-day API.

The module-level ``today`` and ``categories`` functions use a client built
from the environment on first use; build a ``QuotesClient`` yourself for
anything else.
"""

__version__ = "0.1.0"

from typing import Final, List, Optional

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "quotes"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

from quotes.client import QuotesClient, Quote
from quotes.api import (
    QuotesError,
    TransportError,
    DecodeError,
    UnexpectedResponseError,
    ConfigurationError,
)

_default_client: Optional[QuotesClient] = None


def default_client() -> QuotesClient:
    """Return the shared client, starting it on first use."""
    global _default_client
    if _default_client is None:
        from quotes.application import start
        _default_client = start()
    return _default_client


def today(category: Optional[str] = None) -> str:
    """Fetch the text of today's quote."""
    return default_client().today(category)


def categories() -> List[str]:
    """List the available quote categories."""
    return default_client().categories()


__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
    "QuotesClient",
    "Quote",
    "QuotesError",
    "TransportError",
    "DecodeError",
    "UnexpectedResponseError",
    "ConfigurationError",
    "default_client",
    "today",
    "categories",
]
