"""Memoization of search results per query signature."""

import threading
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

import structlog

from ..models.response import SearchResult

ItemT = TypeVar("ItemT")

logger = structlog.get_logger(__name__)


def make_cache_key(normalized_query: str, max_results: Optional[int]) -> str:
    """Build the cache signature for a normalized query and result limit."""
    return f"{normalized_query}_{max_results}"


class QueryCache(Generic[ItemT]):
    """Unbounded, never-expiring result cache.

    Entries are not invalidated when the searched collection changes; callers
    must call ``clear`` after mutating it. All access goes through a lock so
    the cache can be shared by concurrent callers.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: Dict[str, Tuple[SearchResult[ItemT], ...]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[List[SearchResult[ItemT]]]:
        """
        Look up cached results.

        Args:
            key: Cache signature

        Returns:
            Cached results in ranked order, or None on a miss
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1

        logger.debug("Search cache hit", cache_key=key, results=len(entry))
        return list(entry)

    def set(self, key: str, results: List[SearchResult[ItemT]]) -> None:
        """Store ranked results under a cache signature."""
        with self._lock:
            self._entries[key] = tuple(results)

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()

        logger.debug("Search cache cleared", cleared_entries=cleared)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            return {
                "cache_size": len(self._entries),
                "cache_hits": self._hits,
                "cache_misses": self._misses,
            }
