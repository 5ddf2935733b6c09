# src/product_catalog_domain/application/product_use_cases.py
"""Application use cases for the Product catalog.

Each use case is stateless apart from its injected repository and may be
reused across calls. Errors raised by the entity or the repository are never
caught here; they reach the caller unchanged.
"""

import logging

from src.common.dtos.product_dtos import (
    ProductInputDTO,
    ProductOutputDTO,
    ProductUpdateInputDTO,
)
from src.product_catalog_domain.application.product_mapper import to_output_dto
from src.product_catalog_domain.domain.entities.product import Product
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, input_dto: ProductInputDTO) -> ProductOutputDTO:
        """Builds a new disabled product and persists it.

        An invalid payload raises ValidationError before storage is touched.
        """
        product = Product(
            name=input_dto.name,
            description=input_dto.description,
            price=input_dto.price,
        )
        self.product_repo.create(product)
        logger.info(f"Product {product.id} created.")
        return to_output_dto(product)


class GetProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, product_id: str) -> ProductOutputDTO:
        product = self.product_repo.get_by_id(product_id)
        return to_output_dto(product)


class ListProductsUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, page: int, limit: int, sort: str) -> tuple[list[ProductOutputDTO], int]:
        """Returns one page of products and the total number of stored products."""
        products, total_count = self.product_repo.list(page, limit, sort)
        return [to_output_dto(product) for product in products], total_count


class UpdateProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, input_dto: ProductUpdateInputDTO) -> ProductOutputDTO:
        """Replaces name, description and price of a stored product.

        Nothing is persisted unless both the text change and the price change validate.
        """
        product = self.product_repo.get_by_id(input_dto.id)
        product.update(input_dto.name, input_dto.description)
        product.change_price(input_dto.price)
        self.product_repo.update(product)
        logger.info(f"Product {product.id} updated.")
        return to_output_dto(product)


class DeleteProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, product_id: str) -> None:
        self.product_repo.delete(product_id)
        logger.info(f"Product {product_id} deleted.")


class EnableProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, product_id: str) -> ProductOutputDTO:
        """Enables a stored product. A zero-price product is persisted with its status unchanged."""
        product = self.product_repo.get_by_id(product_id)
        product.enable()
        self.product_repo.update(product)
        logger.info(f"Product {product.id} status is now {product.status.value}.")
        return to_output_dto(product)


class DisableProductUseCase:

    def __init__(self, product_repo: IProductRepository) -> None:
        self.product_repo = product_repo

    def execute(self, product_id: str) -> ProductOutputDTO:
        product = self.product_repo.get_by_id(product_id)
        product.disable()
        self.product_repo.update(product)
        logger.info(f"Product {product.id} disabled.")
        return to_output_dto(product)
