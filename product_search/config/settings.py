"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Product Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    max_results: int = Field(default=10)
    max_query_length: int = Field(default=100)

    # Field weights used by the product search engine
    name_weight: float = Field(default=3.0)
    description_weight: float = Field(default=1.5)
    sku_weight: float = Field(default=2.0)

    # Suggestions
    max_suggestions: int = Field(default=5)
    suggestion_threshold: float = Field(default=0.6)

    # Catalog seed data (JSON list of products); bundled sample used when unset
    products_file: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:4200", "http://localhost:3000", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
