"""Product model searched by the service layer."""

from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A catalog product."""

    id: int = Field(..., gt=0, description="Product identifier")
    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    description: Optional[str] = Field(None, max_length=1000, description="Free-text description")
    sku: str = Field(..., min_length=1, max_length=50, description="Stock keeping unit")
    price: float = Field(..., ge=0.0, description="Unit price")
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    category_id: Optional[int] = Field(None, description="Owning category identifier")
