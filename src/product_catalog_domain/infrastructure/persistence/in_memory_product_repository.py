"""In-memory implementation of Product repository.

Used for local runs without a database (PRODUCT_REPOSITORY=memory) and in tests.
Products are copied on the way in and out, so callers never share state with the store.
"""

import copy
import logging
from threading import Lock

from src.common.exceptions.custom_exceptions import DatabaseError, NotFoundError
from src.common.utils.pagination_utils import calculate_offset, normalize_sort_field
from src.product_catalog_domain.domain.entities.product import Product
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)


def _sort_key(sort_field: str):
    if sort_field == "name":
        # Mirrors the case-insensitive collation of the MySQL table
        return lambda product: (product.name.casefold(), product.id)
    if sort_field == "price":
        return lambda product: (product.price, product.id)
    return lambda product: product.id


class InMemoryProductRepository(IProductRepository):

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._lock = Lock()

    def create(self, product: Product) -> None:
        with self._lock:
            if product.id in self._products:
                raise DatabaseError(f"Error saving product {product.id}: duplicate id")
            self._products[product.id] = copy.copy(product)

    def update(self, product: Product) -> None:
        with self._lock:
            if product.id not in self._products:
                raise NotFoundError(f"Product {product.id} not found", entity_id=product.id)
            self._products[product.id] = copy.copy(product)

    def get_by_id(self, product_id: str) -> Product:
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found", entity_id=product_id)
        return copy.copy(product)

    def list(self, page: int, limit: int, sort: str) -> tuple[list[Product], int]:
        with self._lock:
            products = sorted(self._products.values(), key=_sort_key(normalize_sort_field(sort)))
        offset = calculate_offset(page, limit)
        window = products[offset : offset + limit]
        return [copy.copy(product) for product in window], len(products)

    def delete(self, product_id: str) -> None:
        with self._lock:
            if self._products.pop(product_id, None) is None:
                raise NotFoundError(f"Product {product_id} not found", entity_id=product_id)
        logger.debug(f"Product {product_id} removed from memory store.")
