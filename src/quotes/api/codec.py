"""
Body encoding and decoding keyed on content type.

Encoders are chosen by the request's declared Content-Type, decoders by the
response's. Both are looked up in tables keyed on ``ContentType``; types
without an entry are passed through unchanged.
"""

import json
import logging
from typing import Any, Callable, Dict, Union
from urllib.parse import urlencode
from xml.etree import ElementTree as ET

from .content_types import ContentType
from .types import ERROR, ApiResponse, ApiResult, Status

logger = logging.getLogger(__name__)


def _encode_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


def _encode_form(data: Any) -> str:
    return urlencode(data)


_ENCODERS: Dict[ContentType, Callable[[Any], Any]] = {
    ContentType.JSON: _encode_json,
    ContentType.FORM: _encode_form,
}


def encode(data: Any, content_type: Union[str, ContentType]) -> Any:
    """
    Encode a request body for the given content type.

    Examples:
        >>> encode({"a": 1}, "application/json")
        '{"a":1}'
        >>> encode({"a": "o ne"}, "application/x-www-form-urlencoded")
        'a=o+ne'
        >>> encode("<xml/>", "application/xml")
        '<xml/>'
    """
    encoder = _ENCODERS.get(ContentType.from_mime(content_type))
    if encoder is None:
        return data
    return encoder(data)


class _Undecodable(Exception):
    """Raised by a decoder when the body is malformed."""


def _decode_json(body: Union[str, bytes]) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        raise _Undecodable(str(e)) from e


def _decode_xml(body: Union[str, bytes]) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise _Undecodable(str(e)) from e


_DECODERS: Dict[ContentType, Callable[[Union[str, bytes]], Any]] = {
    ContentType.JSON: _decode_json,
    ContentType.XML: _decode_xml,
}


def decode(status: Status, body: Any, content_type: Union[str, ContentType]) -> ApiResult:
    """
    Decode a response body for the given content type.

    Non-text bodies (such as a TransportFailure) and empty bodies are passed
    through with their status. A malformed JSON or XML body yields an ERROR
    result carrying the raw body; the status it replaced is kept in
    ``original_status``.
    """
    if not isinstance(body, (str, bytes)) or len(body) == 0:
        return ApiResult(status, body)

    decoder = _DECODERS.get(ContentType.from_mime(content_type))
    if decoder is None:
        return ApiResult(status, body)

    try:
        return ApiResult(status, decoder(body))
    except _Undecodable as e:
        logger.debug(f"Could not decode {content_type} body (status {status}): {e}")
        return ApiResult(ERROR, body, original_status=status)


def decode_response(response: ApiResponse) -> ApiResult:
    """Decode an ApiResponse using the Content-Type from its headers."""
    return decode(response.status, response.body, response.content_type)
