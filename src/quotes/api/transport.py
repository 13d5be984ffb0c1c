"""
HTTP transport for the quotes service.

``Api`` performs one request per call against the configured service and
returns a decoded ``ApiResult``. Network failures are not raised; they come
back as ``ApiResult(ERROR, TransportFailure(...))`` so the caller decides
what to do with them.
"""

import logging
import re
from typing import Any, Mapping, Optional, Tuple, Type

import httpx

from quotes import USER_AGENT
from quotes.config.indirection import ConfigSource
from quotes.config.settings import ResolvedConfig

from .codec import decode_response, encode
from .content_types import Headers, content_type
from .headers import authorization_header, clean_headers, clean_params
from .types import ERROR, ApiResponse, ApiResult, TransportFailure

logger = logging.getLogger(__name__)

_TRAILING_PORT = re.compile(r":\d+$")

# Checked in order, so subclasses come before their bases
_TRANSPORT_REASONS: Tuple[Tuple[Type[Exception], str], ...] = (
    (httpx.TimeoutException, "timeout"),
    (httpx.ConnectError, "connect_error"),
    (httpx.RemoteProtocolError, "closed"),
    (httpx.TooManyRedirects, "too_many_redirects"),
    (httpx.UnsupportedProtocol, "unsupported_protocol"),
    (httpx.InvalidURL, "invalid_url"),
)

_DNS_FAILURE_HINTS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated with hostname",
)


def transport_reason(error: Exception) -> str:
    """Short, stable reason for a failed request."""
    message = str(error).lower()
    if isinstance(error, httpx.ConnectError) and any(hint in message for hint in _DNS_FAILURE_HINTS):
        return "nxdomain"
    for error_type, reason in _TRANSPORT_REASONS:
        if isinstance(error, error_type):
            return reason
    return type(error).__name__


def clean_url(url: Optional[str], service_url: str) -> str:
    """
    Resolve ``url`` against the service URL.

    Absolute URLs are used as given, ``/paths`` are appended to the service
    URL and an empty value means the service URL itself. A URL ending in a
    port number gets a trailing slash.

    Examples:
        >>> clean_url("http://localhost", "http://quotes.rest")
        'http://localhost'
        >>> clean_url("http://localhost:4000", "http://quotes.rest")
        'http://localhost:4000/'
        >>> clean_url("/qod", "http://localhost:4000")
        'http://localhost:4000/qod'
    """
    if not url:
        resolved = service_url
    elif url.startswith("/"):
        resolved = service_url + url
    else:
        resolved = url

    if _TRAILING_PORT.search(resolved):
        return resolved + "/"
    return resolved


class Api:
    """
    Low-level client for the quotes service.

    Args:
        config: Resolved service URL, token and timeout
        http_client: Optional pre-built httpx.Client (owned by the caller)
    """

    def __init__(
        self,
        config: Optional[ResolvedConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.config = config or ResolvedConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(self.config.timeout),
        )

    @property
    def service_url(self) -> str:
        return self.config.service_url

    def clean_url(self, url: Optional[str] = None) -> str:
        return clean_url(url, self.service_url)

    def authorization_header(self, token: ConfigSource = None) -> Tuple[str, str]:
        return authorization_header(token, self.config.token)

    def call(
        self,
        url: Optional[str],
        method: str,
        body: Any = "",
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Headers] = None,
    ) -> ApiResult:
        """
        Send a request with any HTTP method and decode the response.

        Args:
            url: Absolute URL, or a path starting with "/" on the service URL
            method: HTTP method name ("get", "POST", ...)
            body: Request body, encoded for the declared Content-Type
            query_params: Query parameters; None values are dropped
            headers: Mapping or ordered list of header pairs

        Returns:
            The decoded ApiResult
        """
        target = self.clean_url(url)
        request_headers = clean_headers(headers)
        content = None
        if body is not None and body != "":
            content = encode(body, content_type(request_headers))

        response = self._send(method.upper(), target, content, request_headers, clean_params(query_params))
        return decode_response(response)

    def get(
        self,
        url: Optional[str],
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Headers] = None,
    ) -> ApiResult:
        """Send a GET request to the API."""
        return self.call(url, "get", "", query_params, headers)

    def post(self, url: Optional[str], body: Any = None, headers: Optional[Headers] = None) -> ApiResult:
        """Send a POST request to the API."""
        return self.call(url, "post", body, None, headers)

    def put(self, url: Optional[str], body: Any = None, headers: Optional[Headers] = None) -> ApiResult:
        """Send a PUT request to the API."""
        return self.call(url, "put", body, None, headers)

    def delete(
        self,
        url: Optional[str],
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Headers] = None,
    ) -> ApiResult:
        """Send a DELETE request to the API."""
        return self.call(url, "delete", "", query_params, headers)

    def _send(self, method, url, content, headers, params) -> ApiResponse:
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self._client.request(method, url, content=content, headers=headers, params=params)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            reason = transport_reason(e)
            logger.debug(f"{method} {url} failed: {reason}")
            return ApiResponse(ERROR, TransportFailure(reason, e), [])

        raw_headers = [
            (key.decode("latin-1"), value.decode("latin-1"))
            for key, value in response.headers.raw
        ]
        logger.debug(f"{method} {url} -> {response.status_code}")
        return ApiResponse(response.status_code, response.text, raw_headers)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Api":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
