# src/product_catalog_domain/infrastructure/web/product_routes.py
"""HTTP routes for the Product catalog."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status

from src.common.config.settings import settings
from src.common.dtos.product_dtos import (
    PaginatedProductsDTO,
    ProductInputDTO,
    ProductOutputDTO,
    ProductUpdateInputDTO,
)
from src.common.utils.pagination_utils import DEFAULT_SORT_FIELD, calculate_total_pages
from src.product_catalog_domain.application.product_use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    DisableProductUseCase,
    EnableProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_repository(request: Request) -> IProductRepository:
    """Returns the repository wired into the application at startup."""
    return request.app.state.product_repo


def _parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parses a query parameter, falling back to ``default`` for missing, malformed or non-positive values."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


@router.post("", response_model=ProductOutputDTO, status_code=status.HTTP_201_CREATED, summary="Create a new product")
def create_product(
    payload: ProductInputDTO, product_repo: IProductRepository = Depends(get_product_repository)
) -> ProductOutputDTO:
    return CreateProductUseCase(product_repo).execute(payload)


@router.get("", response_model=PaginatedProductsDTO, summary="List products")
def list_products(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    product_repo: IProductRepository = Depends(get_product_repository),
) -> PaginatedProductsDTO:
    """Lists products page by page. ``sort`` accepts id, name or price; anything else sorts by id."""
    page_number = _parse_positive_int(page, 1)
    page_limit = _parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT)
    sort_field = sort or DEFAULT_SORT_FIELD

    products, total_count = ListProductsUseCase(product_repo).execute(page_number, page_limit, sort_field)
    return PaginatedProductsDTO(
        products=products,
        total_count=total_count,
        page=page_number,
        limit=page_limit,
        total_pages=calculate_total_pages(total_count, page_limit),
    )


@router.get("/{product_id}", response_model=ProductOutputDTO, summary="Get a product")
def get_product(
    product_id: str, product_repo: IProductRepository = Depends(get_product_repository)
) -> ProductOutputDTO:
    return GetProductUseCase(product_repo).execute(product_id)


@router.put("/{product_id}", response_model=ProductOutputDTO, summary="Update a product")
def update_product(
    product_id: str,
    payload: ProductInputDTO,
    product_repo: IProductRepository = Depends(get_product_repository),
) -> ProductOutputDTO:
    update_dto = ProductUpdateInputDTO(
        id=product_id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
    )
    return UpdateProductUseCase(product_repo).execute(update_dto)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a product")
def delete_product(product_id: str, product_repo: IProductRepository = Depends(get_product_repository)) -> Response:
    DeleteProductUseCase(product_repo).execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/enable", response_model=ProductOutputDTO, summary="Enable a product")
def enable_product(
    product_id: str, product_repo: IProductRepository = Depends(get_product_repository)
) -> ProductOutputDTO:
    return EnableProductUseCase(product_repo).execute(product_id)


@router.post("/{product_id}/disable", response_model=ProductOutputDTO, summary="Disable a product")
def disable_product(
    product_id: str, product_repo: IProductRepository = Depends(get_product_repository)
) -> ProductOutputDTO:
    return DisableProductUseCase(product_repo).execute(product_id)
