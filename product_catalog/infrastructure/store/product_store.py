"""
In-memory product store.

The store is the single owner of the id -> Product mapping. Every public
method runs under one acquisition of the store lock, so a caller never sees a
half-applied mutation. The conditional primitives (`put_if_absent`,
`replace_if_present`, `remove_if_present`) fold the existence check and the
mutation into that same acquisition.
"""

import threading
from typing import Dict, Iterable, List, Optional

from product_catalog.config.logger_config import log
from product_catalog.domain.models import SEED_PRODUCTS, Product


class ProductStore:
    """Thread-safe mapping of product id to Product."""

    ID_PREFIX = "P"

    def __init__(self, seed: Optional[Iterable[Product]] = SEED_PRODUCTS):
        self._products: Dict[str, Product] = {}
        self._lock = threading.Lock()

        for product in seed or ():
            self._products[product.id] = product.model_copy()

        log.info("ProductStore initialized", size=len(self._products))

    def list_all(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def put(self, product_id: str, product: Product) -> None:
        with self._lock:
            self._products[product_id] = product

    def contains_key(self, product_id: str) -> bool:
        with self._lock:
            return product_id in self._products

    def remove(self, product_id: str) -> None:
        with self._lock:
            self._products.pop(product_id, None)

    def size(self) -> int:
        with self._lock:
            return len(self._products)

    def put_if_absent(self, product_id: str, product: Product) -> bool:
        """Insert `product` unless `product_id` is taken. Returns True if inserted."""
        with self._lock:
            if product_id in self._products:
                return False
            self._products[product_id] = product
            return True

    def replace_if_present(self, product_id: str, product: Product) -> bool:
        """Overwrite the entry at `product_id` only if one exists."""
        with self._lock:
            if product_id not in self._products:
                return False
            self._products[product_id] = product
            return True

    def remove_if_present(self, product_id: str) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    def generate_id(self) -> str:
        """
        Next id as "P" + (size + 1).

        Not collision-free: after a deletion the generated id can match an
        existing entry, in which case the insert is rejected as a duplicate.
        """
        return f"{self.ID_PREFIX}{self.size() + 1}"
