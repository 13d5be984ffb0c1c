"""
Domain client for the quotes service.
"""

from .models import (
    Quote,
    QuoteContents,
    QuoteOfTheDayResponse,
    CategoryContents,
    CategoriesResponse,
)
from .quotes_client import QuotesClient, QOD_PATH, CATEGORIES_PATH

__all__ = [
    "Quote",
    "QuoteContents",
    "QuoteOfTheDayResponse",
    "CategoryContents",
    "CategoriesResponse",
    "QuotesClient",
    "QOD_PATH",
    "CATEGORIES_PATH",
]
