"""Service layer for the product search API."""

from .catalog import ProductCatalog
from .product_search import ProductSearchService, build_product_engine

__all__ = [
    "ProductCatalog",
    "ProductSearchService",
    "build_product_engine",
]
