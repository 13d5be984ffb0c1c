"""
Request header and query parameter preparation.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from quotes.config.indirection import ConfigSource, resolve_source

from .content_types import CONTENT_TYPE_HEADER, HeaderList, Headers

DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"
AUTHORIZATION_HEADER = "Authorization"


def clean_headers(headers: Optional[Headers] = None) -> HeaderList:
    """
    Normalize headers into a list of pairs with a Content-Type present.

    A mapping has the default Content-Type merged in (the caller's value
    wins). A list keeps its order and gets the default prepended when it
    has no ``Content-Type`` entry.

    Examples:
        >>> clean_headers({"Authorization": "Bearer abc123"})
        [('Authorization', 'Bearer abc123'), ('Content-Type', 'application/json; charset=utf-8')]
        >>> clean_headers([("apples", "delicious")])
        [('Content-Type', 'application/json; charset=utf-8'), ('apples', 'delicious')]
    """
    if headers is None:
        headers = []

    if isinstance(headers, Mapping):
        merged = dict(headers)
        merged.setdefault(CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE)
        return list(merged.items())

    pairs = [(key, value) for key, value in headers]
    if any(key == CONTENT_TYPE_HEADER for key, _ in pairs):
        return pairs
    return [(CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE)] + pairs


def authorization_header(token: ConfigSource = None, configured: ConfigSource = None) -> Tuple[str, str]:
    """
    Build the bearer Authorization header.

    An explicit ``token`` wins over the ``configured`` one; either may be an
    ``env:NAME`` marker or EnvRef. Nothing resolvable gives an empty token.

    Examples:
        >>> authorization_header("abc123")
        ('Authorization', 'Bearer abc123')
        >>> authorization_header()
        ('Authorization', 'Bearer ')
    """
    source = token if token is not None else configured
    resolved = resolve_source(source, "") or ""
    return AUTHORIZATION_HEADER, f"Bearer {resolved}"


def clean_params(query_params: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """
    Prepare query parameters for httpx.

    ``None`` values are dropped; when nothing is left no parameters are
    attached at all.
    """
    if not query_params:
        return None
    params = {key: value for key, value in query_params.items() if value is not None}
    return params or None
