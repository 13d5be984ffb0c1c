"""
Response models for the quotes service.

Only the fields the client relies on are required; anything else the
service sends is kept as extra data on the model.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    """A single quote as returned by ``/qod``."""
    model_config = ConfigDict(extra="allow")

    quote: str
    author: Optional[str] = None
    category: Optional[str] = None
    title: Optional[str] = None


class QuoteContents(BaseModel):
    model_config = ConfigDict(extra="allow")

    quotes: List[Quote] = Field(min_length=1)


class QuoteOfTheDayResponse(BaseModel):
    """Envelope of ``GET /qod``."""
    model_config = ConfigDict(extra="allow")

    contents: QuoteContents


class CategoryContents(BaseModel):
    model_config = ConfigDict(extra="allow")

    categories: Dict[str, Any]


class CategoriesResponse(BaseModel):
    """Envelope of ``GET /qod/categories``; categories map id to description."""
    model_config = ConfigDict(extra="allow")

    contents: CategoryContents
