"""
Content type handling for requests and responses.

Header lists are ordered ``(key, value)`` pairs. The ``Content-Type`` key
is matched literally (case-sensitive), as it is when headers are cleaned
for an outgoing request.
"""

from enum import Enum
from typing import List, Mapping, Sequence, Tuple, Union

CONTENT_TYPE_HEADER = "Content-Type"
DEFAULT_MIME_TYPE = "application/json"

HeaderList = List[Tuple[str, str]]
Headers = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


class ContentType(Enum):
    """Body formats the codec knows how to handle."""
    JSON = "application/json"
    XML = "application/xml"
    FORM = "application/x-www-form-urlencoded"
    OTHER = "other"

    @classmethod
    def from_mime(cls, mime_type: Union[str, "ContentType", None]) -> "ContentType":
        """Map a bare MIME type (no parameters) onto a ContentType."""
        if isinstance(mime_type, ContentType):
            return mime_type
        for member in (cls.JSON, cls.XML, cls.FORM):
            if member.value == mime_type:
                return member
        return cls.OTHER


def mime_type(header_value: str) -> str:
    """
    Strip ``;``-delimited parameters from a Content-Type value.

    Examples:
        >>> mime_type("application/xml; charset=utf-8")
        'application/xml'
    """
    return header_value.split(";", 1)[0].strip()


def content_type(headers: Headers) -> str:
    """
    Extract the MIME type from a header list.

    The first header whose key is exactly ``Content-Type`` wins. Without
    one the type is assumed to be JSON.

    Examples:
        >>> content_type([])
        'application/json'
        >>> content_type([("Server", "GitHub.com"), ("Content-Type", "application/xml; charset=utf-8")])
        'application/xml'
    """
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    for key, value in pairs:
        if key == CONTENT_TYPE_HEADER:
            return mime_type(value)
    return DEFAULT_MIME_TYPE
