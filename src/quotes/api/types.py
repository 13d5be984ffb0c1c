"""
Value types passed between the transport and the codec.
"""

from dataclasses import dataclass, field
from typing import Any, Final, Optional, Union

from .content_types import HeaderList, content_type

# Marker used in place of an HTTP status code when a call failed
ERROR: Final[str] = "error"

Status = Union[int, str]


@dataclass(frozen=True)
class TransportFailure:
    """Why a request produced no HTTP response at all."""
    reason: str
    error: Optional[Exception] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class ApiResponse:
    """Raw outcome of one HTTP exchange, before decoding."""
    status: Status
    body: Any
    headers: HeaderList = field(default_factory=list)

    @property
    def content_type(self) -> str:
        return content_type(self.headers)


@dataclass(frozen=True)
class ApiResult:
    """
    Decoded outcome of one HTTP exchange.

    ``status`` is the HTTP status code, or ERROR when the transport failed
    or the body could not be decoded. In the decode case ``original_status``
    keeps the status the server actually sent.
    """
    status: Status
    body: Any
    original_status: Optional[Status] = None

    @property
    def is_error(self) -> bool:
        return self.status == ERROR

    @property
    def is_transport_failure(self) -> bool:
        return self.is_error and isinstance(self.body, TransportFailure)

    @property
    def is_decode_failure(self) -> bool:
        return self.is_error and self.original_status is not None
