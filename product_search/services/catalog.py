"""In-memory product catalog supplying search candidates."""

import json
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import structlog

from ..models.product import Product

logger = structlog.get_logger(__name__)


class ProductCatalog:
    """Holds the products the search service ranks.

    The catalog only stores and hands out products; uniqueness and category
    rules belong to the surrounding product management system.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            products: Initial products
        """
        self._products: List[Product] = list(products or [])
        self._lock = threading.Lock()

    def load(self, products: Iterable[Product]) -> int:
        """
        Append products to the catalog.

        Args:
            products: Products to add

        Returns:
            Number of products added
        """
        new_products = list(products)
        with self._lock:
            self._products.extend(new_products)
        return len(new_products)

    def replace(self, products: Iterable[Product]) -> int:
        """Replace the catalog content and return the new product count."""
        new_products = list(products)
        with self._lock:
            self._products = new_products
        return len(new_products)

    def load_json(self, path: Union[str, Path]) -> int:
        """
        Load products from a JSON file holding a list of product objects.

        Args:
            path: Path to the JSON file

        Returns:
            Number of products loaded

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If an entry is not a valid product
        """
        with open(path, "r", encoding="utf-8") as f:
            raw_products = json.load(f)

        products = [Product.model_validate(entry) for entry in raw_products]
        count = self.replace(products)
        logger.info("Product catalog loaded", path=str(path), total_products=count)
        return count

    def all(self) -> List[Product]:
        """Snapshot of every product, in insertion order."""
        with self._lock:
            return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        """Find a product by identifier."""
        with self._lock:
            for product in self._products:
                if product.id == product_id:
                    return product
        return None

    def vocabulary(self) -> List[str]:
        """Distinct lowercase words found in product names, descriptions and SKUs."""
        words: Dict[str, None] = {}
        for product in self.all():
            for value in (product.name, product.description, product.sku):
                if not value:
                    continue
                for word in value.lower().split():
                    words.setdefault(word, None)
        return list(words)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
