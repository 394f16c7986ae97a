"""
Product Search - Weighted multi-field fuzzy search for product catalogs.

This package provides a search engine that scores items against several
weighted text fields, tolerating typos through prefix, substring, edit
distance and common typo heuristics, and returns deterministically ranked
results with per-query memoization.
"""

__version__ = "1.0.0"

from .core.engine import FuzzySearchEngine
from .models.response import SearchResult
from .models.product import Product

__all__ = [
    "FuzzySearchEngine",
    "SearchResult",
    "Product",
]
