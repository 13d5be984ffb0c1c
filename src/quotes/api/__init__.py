"""
Low-level API layer for the quotes service.

This package provides the HTTP transport, header handling and the
content-type driven body codec used by the domain client.
"""

from .errors import (
    QuotesError,
    TransportError,
    DecodeError,
    UnexpectedResponseError,
    ConfigurationError,
    create_user_friendly_message,
)
from .content_types import (
    CONTENT_TYPE_HEADER,
    ContentType,
    HeaderList,
    Headers,
    content_type,
    mime_type,
)
from .types import ERROR, ApiResponse, ApiResult, Status, TransportFailure
from .codec import encode, decode, decode_response
from .headers import DEFAULT_CONTENT_TYPE, authorization_header, clean_headers, clean_params
from .transport import Api, clean_url, transport_reason

__all__ = [
    # Errors
    "QuotesError",
    "TransportError",
    "DecodeError",
    "UnexpectedResponseError",
    "ConfigurationError",
    "create_user_friendly_message",
    # Content types
    "CONTENT_TYPE_HEADER",
    "ContentType",
    "HeaderList",
    "Headers",
    "content_type",
    "mime_type",
    # Values
    "ERROR",
    "ApiResponse",
    "ApiResult",
    "Status",
    "TransportFailure",
    # Codec
    "encode",
    "decode",
    "decode_response",
    # Headers
    "DEFAULT_CONTENT_TYPE",
    "authorization_header",
    "clean_headers",
    "clean_params",
    # Transport
    "Api",
    "clean_url",
    "transport_reason",
]
