"""Response models for the search engine and API endpoints."""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .product import Product

ItemT = TypeVar("ItemT")


class SearchResult(BaseModel, Generic[ItemT]):
    """A matched item with its aggregated score.

    The item is held by reference; the engine never copies or mutates it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    item: ItemT = Field(..., description="The matched item")
    score: float = Field(..., ge=0.0, description="Weighted total score")
    matched_fields: int = Field(..., ge=0, description="Number of fields that scored above zero")


class ProductHit(BaseModel):
    """Individual product search hit."""

    product: Product = Field(..., description="The matched product")
    score: float = Field(..., ge=0.0, description="Weighted relevance score")
    matched_fields: int = Field(..., ge=0, description="Number of fields that matched")


class ProductSearchResponse(BaseModel):
    """Response for product search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[ProductHit] = Field(..., description="Ranked search hits")
    cache_hit: bool = Field(..., description="Whether the engine served the result from its cache")
    suggestions: Optional[List[str]] = Field(None, description="Alternative words if nothing matched")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class CacheClearResponse(BaseModel):
    """Response for cache maintenance requests."""

    message: str = Field(..., description="Outcome description")
    cleared_entries: int = Field(..., description="Number of cache entries removed")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
