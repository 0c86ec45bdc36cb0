from typing import List

from product_catalog.config.logger_config import log
from product_catalog.core.exceptions import (
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from product_catalog.domain.models import Product
from product_catalog.infrastructure.store.product_store import ProductStore
from product_catalog.interfaces.http.schemas import ProductPayload


class ProductService:
    """
    Service class for handling product-related business logic.
    Maps the catalog operations onto the in-memory ProductStore.
    """

    def __init__(self, store: ProductStore):
        """
        Initialize the service with the shared product store.
        Args:
            store: The process-wide ProductStore.
        """
        self.store = store

    def list_products(self) -> List[Product]:
        products = self.store.list_all()
        log.debug("Products listed", count=len(products))
        return products

    def get_product(self, product_id: str) -> List[Product]:
        """
        Look up a single product.
        Returns:
            A list with the product, or an empty list if the id is unknown.
            A missing id is a normal outcome here, not an error.
        """
        product = self.store.get(product_id)
        if product is None:
            log.warning("Product not found", product_id=product_id)
            return []
        return [product]

    def create_product(self, payload: ProductPayload) -> Product:
        """
        Create a new product.
        Args:
            payload: Product body; the id is optional.
        Returns:
            The stored Product.
        Raises:
            ProductAlreadyExistsError: If the (given or generated) id is taken.
        """
        if payload.id and payload.id.strip():
            product_id = payload.id
        else:
            product_id = self.store.generate_id()
        product = payload.to_product(product_id)

        if not self.store.put_if_absent(product_id, product):
            log.warning("Product with ID already exists", product_id=product_id)
            raise ProductAlreadyExistsError(
                f"Product with ID {product_id} already exists"
            )

        log.info("Product created successfully", product_id=product_id)
        return product

    def update_product(self, product_id: str, payload: ProductPayload) -> Product:
        """
        Replace an existing product. The path id wins over any id in the body.
        Raises:
            ProductNotFoundError: If no product is stored under `product_id`.
        """
        product = payload.to_product(product_id)

        if not self.store.replace_if_present(product_id, product):
            log.warning("Product not found for update", product_id=product_id)
            raise ProductNotFoundError(f"Product not found with ID: {product_id}")

        log.info("Product updated successfully", product_id=product_id)
        return product

    def delete_product(self, product_id: str) -> None:
        if not self.store.remove_if_present(product_id):
            log.warning("Product not found for deletion", product_id=product_id)
            raise ProductNotFoundError(f"Product not found with ID: {product_id}")

        log.info("Product deleted", product_id=product_id)
