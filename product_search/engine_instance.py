"""Global catalog and search service instances to avoid circular imports."""

from .config import get_settings
from .services import ProductCatalog, ProductSearchService

# Global service instances
settings = get_settings()
catalog = ProductCatalog()
search_service = ProductSearchService(catalog, settings)
