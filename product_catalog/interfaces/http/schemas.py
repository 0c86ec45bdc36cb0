from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import Field

from product_catalog.domain.models import CatalogModel, Price, Product

SERVICE_SOURCE = "product-service"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProductPayload(CatalogModel):
    """
    Request body for create and update.
    The id is optional on create and ignored on update.
    """

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    price: Price
    category: str

    in_stock: bool = False
    available_quantity: Optional[int] = None
    estimated_delivery: Optional[str] = None
    warehouse_location: Optional[str] = None

    def to_product(self, product_id: str) -> Product:
        return Product(id=product_id, **self.model_dump(exclude={"id"}))


class ProductCollectionResponse(CatalogModel):
    """
    Envelope returned by every product read and write.
    Wraps zero or more products with a generation timestamp.
    """

    products: List[Product]
    timestamp: str = Field(default_factory=_now_iso)
    service_source: str = SERVICE_SOURCE
    inventory_status: Optional[str] = None


class ErrorCode(str, Enum):
    DUPLICATE_PRODUCT = "DUPLICATE_PRODUCT"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorResponse(CatalogModel):
    message: str
    code: ErrorCode
    timestamp: str = Field(default_factory=_now_iso)
    path: str


class HealthResponse(CatalogModel):
    status: str
    service: str
    products: int
