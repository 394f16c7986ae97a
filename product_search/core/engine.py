"""Main fuzzy search engine implementation."""

import threading
import time
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

import structlog

from ..models.response import SearchResult
from .cache import QueryCache, make_cache_key
from .fields import FieldRegistry, SearchField
from .ranker import rank_results, score_item
from .scorer import FieldScorer

ItemT = TypeVar("ItemT")

logger = structlog.get_logger(__name__)


class FuzzySearchEngine(Generic[ItemT]):
    """Weighted multi-field fuzzy search over arbitrary items.

    Fields are registered with ``add_field`` and scored in registration
    order. Results are memoized per normalized query and limit until
    ``clear_cache`` is called; the engine never notices changes to the
    items it was given.

    Example:
        >>> engine = (
        ...     FuzzySearchEngine()
        ...     .add_field(lambda p: p.name, 3.0)
        ...     .add_field(lambda p: p.description, 1.5)
        ... )
        >>> results = engine.search(products, "wireless mouse", max_results=5)
    """

    def __init__(self) -> None:
        """Initialize the search engine."""
        self.registry: FieldRegistry[ItemT] = FieldRegistry()
        self.scorer = FieldScorer()
        self.normalizer = self.scorer.normalizer
        self.cache: QueryCache[ItemT] = QueryCache()

        # Performance tracking
        self._stats_lock = threading.Lock()
        self._stats = {
            "total_queries": 0,
            "total_execution_time": 0.0,
        }

    def add_field(
        self,
        extractor: Callable[[ItemT], Optional[str]],
        weight: float = 1.0
    ) -> "FuzzySearchEngine[ItemT]":
        """
        Register a searchable field.

        Args:
            extractor: Callable mapping an item to an optional string
            weight: Multiplier applied to the field score

        Returns:
            The engine itself, for chaining

        Raises:
            TypeError: If extractor is None or not callable
        """
        self.registry.add(extractor, weight)
        return self

    @property
    def fields(self) -> Tuple[SearchField[ItemT], ...]:
        """Registered fields in registration order."""
        return self.registry.fields

    def search(
        self,
        items: Iterable[ItemT],
        query: Optional[str],
        max_results: Optional[int] = 10
    ) -> List[SearchResult[ItemT]]:
        """
        Search items for a free-text query.

        Args:
            items: Candidate items; they are referenced, never copied or mutated
            query: Search query
            max_results: Maximum number of results, None for no limit

        Returns:
            Ranked results, best first. Blank queries and empty collections
            return an empty list without touching the cache.
        """
        if self.normalizer.is_blank(query):
            return []

        candidates = list(items)
        if not candidates:
            return []

        start_time = time.time()
        normalized_query = self.normalizer.normalize(query)
        cache_key = make_cache_key(normalized_query, max_results)

        cached = self.cache.get(cache_key)
        if cached is not None:
            self._record_query(start_time)
            return cached

        scored = []
        for item in candidates:
            result = score_item(item, normalized_query, self.registry, self.scorer)
            if result is not None:
                scored.append(result)

        results = rank_results(scored, max_results)
        self.cache.set(cache_key, results)

        execution_time = self._record_query(start_time)
        logger.debug(
            "Search computed",
            query=normalized_query,
            candidates=len(candidates),
            matched=len(scored),
            returned=len(results),
            execution_time_ms=round(execution_time, 3),
        )
        return list(results)

    def is_cached(self, query: Optional[str], max_results: Optional[int] = 10) -> bool:
        """Whether a search for query and limit would be served from the cache."""
        if self.normalizer.is_blank(query):
            return False
        return make_cache_key(self.normalizer.normalize(query), max_results) in self.cache

    def clear_cache(self) -> None:
        """Drop all memoized results."""
        self.cache.clear()

    def _record_query(self, start_time: float) -> float:
        execution_time = (time.time() - start_time) * 1000
        with self._stats_lock:
            self._stats["total_queries"] += 1
            self._stats["total_execution_time"] += execution_time
        return execution_time

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        with self._stats_lock:
            stats: Dict[str, Any] = self._stats.copy()

        stats.update(self.cache.get_stats())
        stats["total_fields"] = len(self.registry)

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        return stats
