"""Unit tests for the product catalog and search service."""

import json

import pytest

from product_search.config import Settings
from product_search.models.product import Product
from product_search.services import ProductCatalog, ProductSearchService, build_product_engine


@pytest.fixture
def settings():
    """Settings with the default product weights."""
    return Settings(max_results=10, max_suggestions=3)


@pytest.fixture
def products():
    """Sample products for testing."""
    return [
        Product(id=1, name="Wireless Mouse", description="Ergonomic wireless mouse",
                sku="ACC-MOU-001", price=24.99, quantity=150, category_id=3),
        Product(id=2, name="Mechanical Keyboard", description="Tenkeyless keyboard",
                sku="ACC-KEY-002", price=89.5, quantity=40, category_id=3),
        Product(id=3, name="Portable Speaker", description="Waterproof bluetooth speaker",
                sku="AUD-SPK-006", price=59.99, quantity=80, category_id=4),
    ]


class TestProductCatalog:
    """Test cases for the ProductCatalog class."""

    def test_load_and_all(self, products):
        """Test loading products and taking snapshots."""
        catalog = ProductCatalog()

        assert catalog.load(products) == 3
        assert len(catalog) == 3
        assert catalog.all() == products

    def test_replace(self, products):
        """Test that replace swaps the whole content."""
        catalog = ProductCatalog(products)

        catalog.replace(products[:1])

        assert len(catalog) == 1

    def test_get(self, products):
        """Test lookups by identifier."""
        catalog = ProductCatalog(products)

        assert catalog.get(2).name == "Mechanical Keyboard"
        assert catalog.get(99) is None

    def test_vocabulary(self, products):
        """Test that vocabulary holds distinct lowercase words."""
        vocabulary = ProductCatalog(products).vocabulary()

        assert "wireless" in vocabulary
        assert "acc-mou-001" in vocabulary
        assert vocabulary.count("wireless") == 1

    def test_load_json(self, tmp_path, products):
        """Test loading products from a JSON file."""
        path = tmp_path / "products.json"
        path.write_text(json.dumps([p.model_dump() for p in products]), encoding="utf-8")

        catalog = ProductCatalog()

        assert catalog.load_json(path) == 3
        assert catalog.get(3).sku == "AUD-SPK-006"

    def test_load_json_missing_file(self, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            ProductCatalog().load_json(tmp_path / "missing.json")


class TestProductSearchService:
    """Test cases for the ProductSearchService class."""

    @pytest.fixture
    def service(self, products, settings):
        """Create a service over the sample products."""
        return ProductSearchService(ProductCatalog(products), settings)

    def test_engine_weights(self, settings):
        """Test that name, description and SKU are weighted from settings."""
        engine = build_product_engine(settings)
        assert [field.weight for field in engine.fields] == [3.0, 1.5, 2.0]

    def test_search_with_typo(self, service):
        """Test that a transposed query still finds the product."""
        results = service.search("keybaord")
        assert results[0].item.id == 2

    def test_search_by_sku(self, service):
        """Test searching by stock keeping unit."""
        results = service.search("aud-spk-006")

        assert results[0].item.id == 3
        assert results[0].matched_fields == 1

    def test_search_blank_query(self, service):
        """Test that blank queries return nothing."""
        assert service.search("   ") == []

    def test_list_matching(self, service):
        """Test the unlimited ranking used by listings."""
        products = service.list_matching("wireless")
        assert [p.id for p in products] == [1]

    def test_reload_clears_cache(self, service, products):
        """Test that reloading the catalog discards stale results."""
        service.search("speaker")
        assert service.is_cached("speaker")

        count = service.reload(products[:2])

        assert count == 2
        assert not service.is_cached("speaker")
        assert service.search("speaker") == []

    def test_clear_cache_reports_entries(self, service):
        """Test clear_cache returns the number of dropped entries."""
        service.search("mouse")
        service.search("keyboard")

        assert service.clear_cache() == 2
        assert service.clear_cache() == 0

    def test_suggest(self, service):
        """Test 'did you mean' suggestions."""
        suggestions = service.suggest("keybord")

        assert "keyboard" in suggestions
        assert len(suggestions) <= 3

    def test_suggest_blank_query(self, service):
        """Test that blank queries get no suggestions."""
        assert service.suggest("  ") == []

    def test_suggest_empty_catalog(self, settings):
        """Test suggestions without any products."""
        service = ProductSearchService(ProductCatalog(), settings)
        assert service.suggest("mouse") == []
