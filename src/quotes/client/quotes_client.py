"""
Domain client for the quotes service.

``QuotesClient`` calls fixed endpoints through ``Api`` and pulls the
interesting fields out of the decoded payload. Every way a call can fail
surfaces as a ``QuotesError`` subclass:

- ``TransportError`` when no HTTP response arrived
- ``DecodeError`` when the body was not valid for its content type
- ``UnexpectedResponseError`` for any status other than 200 or a payload
  missing the expected fields
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from quotes.api import (
    Api,
    ApiResult,
    DecodeError,
    TransportError,
    UnexpectedResponseError,
)
from quotes.config.settings import ResolvedConfig

from .models import CategoriesResponse, Quote, QuoteOfTheDayResponse

logger = logging.getLogger(__name__)

QOD_PATH = "/qod"
CATEGORIES_PATH = "/qod/categories"

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class QuotesClient:
    """
    Client for the quote-of-the-day API.

    Args:
        config: Resolved configuration; ignored when ``api`` is given
        api: Pre-built Api transport
    """

    def __init__(self, config: Optional[ResolvedConfig] = None, api: Optional[Api] = None):
        self.api = api or Api(config)

    @property
    def config(self) -> ResolvedConfig:
        return self.api.config

    def quote_of_the_day(self, category: Optional[str] = None) -> Quote:
        """Fetch today's quote record, optionally for one category."""
        result = self.api.get(QOD_PATH, {"category": category}, self._headers())
        payload = self._expect(result, QuoteOfTheDayResponse, "today", QOD_PATH)
        return payload.contents.quotes[0]

    def today(self, category: Optional[str] = None) -> str:
        """Fetch the text of today's quote."""
        return self.quote_of_the_day(category).quote

    def category_descriptions(self) -> Dict[str, Any]:
        """Fetch the available categories with their descriptions."""
        result = self.api.get(CATEGORIES_PATH, None, self._headers())
        payload = self._expect(result, CategoriesResponse, "categories", CATEGORIES_PATH)
        return payload.contents.categories

    def categories(self) -> List[str]:
        """Fetch the available category ids, in the order the service sent them."""
        return list(self.category_descriptions())

    def _headers(self) -> List:
        # Only authenticate when a token is configured
        if not self.config.token:
            return []
        return [self.api.authorization_header()]

    def _expect(
        self,
        result: ApiResult,
        model: Type[ResponseModel],
        operation: str,
        path: str,
    ) -> ResponseModel:
        if result.is_transport_failure:
            url = self.api.clean_url(path)
            raise TransportError(
                f"{operation}: request to {url} failed",
                reason=result.body.reason,
                url=url,
                original_error=result.body.error,
            )

        if result.is_decode_failure:
            raise DecodeError(
                f"{operation}: response body could not be decoded",
                body=result.body,
                status=result.original_status if isinstance(result.original_status, int) else None,
            )

        if result.status != 200:
            raise UnexpectedResponseError(
                f"{operation}: expected status 200, got {result.status}",
                operation=operation,
                body=result.body,
                status=result.status if isinstance(result.status, int) else None,
            )

        try:
            return model.model_validate(result.body)
        except ValidationError as e:
            logger.debug(f"{operation}: payload did not match {model.__name__}: {e}")
            raise UnexpectedResponseError(
                f"{operation}: response did not match the expected shape",
                operation=operation,
                body=result.body,
                status=result.status,
                original_error=e,
            ) from e

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "QuotesClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
