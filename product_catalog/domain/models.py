from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices are fixed-point internally but go over the wire as JSON numbers.
# 15 significant digits and 2 places always survive a double round-trip.
Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=15, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CatalogModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Product(CatalogModel):
    """
    Represents a product in the catalog.

    The inventory fields exist for an inventory service to enrich; this
    service never populates them.
    """

    id: str = Field(min_length=1, description="Unique identifier, e.g. 'P001'")
    name: str = Field(description="Product name")
    description: Optional[str] = Field(
        default=None, description="Detailed description of the product"
    )
    price: Price = Field(description="Unit price")
    category: str = Field(description="Catalog category, e.g. 'Electronics'")

    in_stock: bool = Field(default=False)
    available_quantity: Optional[int] = None
    estimated_delivery: Optional[str] = None
    warehouse_location: Optional[str] = None


class Principal(BaseModel):
    """Authenticated identity attached to a request."""

    name: str
    method: str  # "certificate" or "bearer"
    claims: Dict[str, Any] = Field(default_factory=dict)


SEED_PRODUCTS = (
    Product(
        id="P001",
        name="Laptop",
        description="High-performance laptop",
        price=Decimal("1299.99"),
        category="Electronics",
    ),
    Product(
        id="P002",
        name="Smartphone",
        description="Latest smartphone model",
        price=Decimal("799.99"),
        category="Electronics",
    ),
    Product(
        id="P003",
        name="Coffee Maker",
        description="Automatic coffee machine",
        price=Decimal("129.99"),
        category="Home Appliances",
    ),
)
