"""Data Transfer Objects for Product catalog data."""

from dataclasses import dataclass, field


@dataclass
class ProductInputDTO:
    """DTO for the payload used to create a product (also the body of an update request)."""

    name: str = ""
    description: str = ""
    price: float = 0.0


@dataclass
class ProductUpdateInputDTO:
    """DTO for a full update of an existing product, identified by id."""

    id: str
    name: str
    description: str = ""
    price: float = 0.0


@dataclass
class ProductOutputDTO:
    """DTO for a product as exposed on the wire."""

    id: str
    name: str
    description: str
    price: float
    status: str  # "enabled" | "disabled"


@dataclass
class PaginatedProductsDTO:
    """DTO for one page of the product listing."""

    products: list[ProductOutputDTO] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0
