"""
Structured error system for the Quotes API client.

At the ``Api`` level transport and decode failures are reported as
``ApiResult`` values carrying the ERROR marker. The domain client turns
those values, and any response it cannot interpret, into the exceptions
defined here.
"""

from typing import Any, Dict, Optional


class QuotesError(Exception):
    """Base exception for all Quotes API related errors."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "status": self.status,
            "code": self.code,
            "details": self.details,
            "type": self.__class__.__name__
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.status:
            parts.append(f"(Status: {self.status})")
        if self.code:
            parts.append(f"(Code: {self.code})")
        return " ".join(parts)


class TransportError(QuotesError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""

    def __init__(
        self,
        message: str = "Transport error",
        reason: Optional[str] = None,
        url: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="TRANSPORT_ERROR", **kwargs)
        if reason:
            self.details["reason"] = reason
        if url:
            self.details["url"] = url

    @property
    def reason(self) -> Optional[str]:
        return self.details.get("reason")


class DecodeError(QuotesError):
    """The response body could not be decoded for its declared content type."""

    def __init__(
        self,
        message: str = "Could not decode response body",
        body: Optional[str] = None,
        content_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="DECODE_ERROR", **kwargs)
        self.body = body
        if content_type:
            self.details["content_type"] = content_type


class UnexpectedResponseError(QuotesError):
    """The response status or shape is not what the operation expects."""

    def __init__(
        self,
        message: str = "Unexpected response",
        operation: Optional[str] = None,
        body: Any = None,
        **kwargs
    ):
        super().__init__(message, code="UNEXPECTED_RESPONSE", **kwargs)
        self.body = body
        if operation:
            self.details["operation"] = operation


class ConfigurationError(QuotesError):
    """Error related to client configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, code="CONFIGURATION_ERROR", **kwargs)
        if config_field:
            self.details["config_field"] = config_field


def create_user_friendly_message(error: QuotesError) -> str:
    """
    Create a user-friendly error message.

    Args:
        error: The QuotesError to convert

    Returns:
        User-friendly error message
    """
    if isinstance(error, TransportError):
        reason = error.reason
        if reason:
            return f"Could not reach the quotes service ({reason}). Please check QUOTES_SERVICE_URL and your connection."
        return "Could not reach the quotes service. Please check QUOTES_SERVICE_URL and your connection."

    elif isinstance(error, DecodeError):
        return "The quotes service sent a response that could not be read."

    elif isinstance(error, UnexpectedResponseError):
        if error.status == 401:
            return "Authentication failed. Please check your token in the QUOTES_TOKEN environment variable."
        if error.status == 429:
            return "Too many requests to the quotes service. Please try again later."
        if error.status and error.status >= 500:
            return "The quotes service reported an error. Please try again later."
        return f"The quotes service returned an unexpected response: {error.message}"

    elif isinstance(error, ConfigurationError):
        return f"Configuration problem: {error.message}"

    else:
        return f"An error occurred: {error.message}"
