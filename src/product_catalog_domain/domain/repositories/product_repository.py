# src/product_catalog_domain/domain/repositories/product_repository.py
"""Product repository interface."""
from abc import ABC, abstractmethod

from src.product_catalog_domain.domain.entities.product import Product


class IProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persists a new product."""
        pass

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persists name, description, price and status of an existing product.

        Raises NotFoundError when no product with that id is stored.
        """
        pass

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product:
        """Retrieves a product by its id. Raises NotFoundError when it is absent."""
        pass

    @abstractmethod
    def list(self, page: int, limit: int, sort: str) -> tuple[list[Product], int]:
        """Retrieves one page of products and the total number of stored products.

        ``sort`` must be one of id, name or price; any other value sorts by id.
        """
        pass

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Deletes a product by its id. Raises NotFoundError when it is absent."""
        pass
