"""Data models for the product search service."""

from .product import Product
from .response import (
    SearchResult,
    ProductHit,
    ProductSearchResponse,
    CacheClearResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest

__all__ = [
    "Product",
    "SearchResult",
    "ProductHit",
    "ProductSearchResponse",
    "CacheClearResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
]
