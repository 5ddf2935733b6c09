"""Mapping between Product entities and the product DTOs."""

from src.common.dtos.product_dtos import ProductOutputDTO
from src.product_catalog_domain.domain.entities.product import Product


def to_output_dto(product: Product) -> ProductOutputDTO:
    return ProductOutputDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        status=product.status.value,
    )
