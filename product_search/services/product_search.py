"""Product search service wiring the fuzzy engine to the catalog."""

from typing import Iterable, List, Optional

import structlog
from rapidfuzz import fuzz, process

from ..config import Settings, get_settings
from ..core.engine import FuzzySearchEngine
from ..models.product import Product
from ..models.response import SearchResult
from .catalog import ProductCatalog

logger = structlog.get_logger(__name__)


def product_name(product: Product) -> Optional[str]:
    return product.name


def product_description(product: Product) -> Optional[str]:
    return product.description


def product_sku(product: Product) -> Optional[str]:
    return product.sku


def build_product_engine(settings: Settings) -> FuzzySearchEngine[Product]:
    """Create an engine weighting product name, description and SKU."""
    return (
        FuzzySearchEngine()
        .add_field(product_name, settings.name_weight)
        .add_field(product_description, settings.description_weight)
        .add_field(product_sku, settings.sku_weight)
    )


class ProductSearchService:
    """Searches the product catalog with typo tolerance."""

    def __init__(
        self,
        catalog: ProductCatalog,
        settings: Optional[Settings] = None,
        engine: Optional[FuzzySearchEngine[Product]] = None
    ) -> None:
        """
        Initialize the service.

        Args:
            catalog: Source of candidate products
            settings: Application settings (cached settings if None)
            engine: Preconfigured engine (product field weights if None)
        """
        self.catalog = catalog
        self.settings = settings or get_settings()
        self.engine = engine or build_product_engine(self.settings)

    def search(
        self,
        query: Optional[str],
        max_results: Optional[int] = None
    ) -> List[SearchResult[Product]]:
        """
        Rank catalog products against a query.

        Args:
            query: Search query
            max_results: Maximum number of results (settings default if None)

        Returns:
            Ranked search results
        """
        limit = max_results or self.settings.max_results
        logger.debug("Product search", query=query, max_results=limit)
        return self.engine.search(self.catalog.all(), query, limit)

    def list_matching(self, query: Optional[str]) -> List[Product]:
        """Every product matching query, best match first, without a result limit."""
        results = self.engine.search(self.catalog.all(), query, None)
        return [result.item for result in results]

    def is_cached(self, query: Optional[str], max_results: Optional[int] = None) -> bool:
        """Whether the engine would answer this search from its cache."""
        return self.engine.is_cached(query, max_results or self.settings.max_results)

    def reload(self, products: Iterable[Product]) -> int:
        """
        Replace the catalog content.

        The engine cache is cleared because it never notices catalog changes
        on its own.

        Args:
            products: New catalog content

        Returns:
            Number of products now in the catalog
        """
        count = self.catalog.replace(products)
        self.clear_cache()
        logger.info("Product catalog reloaded", total_products=count)
        return count

    def clear_cache(self) -> int:
        """Clear the engine cache and return how many entries were dropped."""
        cleared = len(self.engine.cache)
        self.engine.clear_cache()
        return cleared

    def suggest(self, query: Optional[str], max_suggestions: Optional[int] = None) -> List[str]:
        """
        Suggest catalog words close to each query token.

        Args:
            query: Query to get suggestions for
            max_suggestions: Maximum number of suggestions

        Returns:
            Suggested words, best first, without duplicates
        """
        if not query or not query.strip():
            return []

        vocabulary = self.catalog.vocabulary()
        if not vocabulary:
            return []

        limit = max_suggestions or self.settings.max_suggestions
        cutoff = self.settings.suggestion_threshold * 100

        scored = {}
        for token in query.lower().split():
            for word, score, _ in process.extract(
                token,
                vocabulary,
                scorer=fuzz.ratio,
                limit=limit,
                score_cutoff=cutoff
            ):
                if word != token and score > scored.get(word, -1.0):
                    scored[word] = score

        ranked = sorted(scored.items(), key=lambda pair: pair[1], reverse=True)
        return [word for word, _ in ranked[:limit]]
