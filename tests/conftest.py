# tests/conftest.py
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from src.common.config.settings import settings
from src.common.dtos.product_dtos import ProductInputDTO
from src.product_catalog_domain.domain.entities.product import Product
from src.product_catalog_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from src.product_catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLProductRepository,
)
from src.product_catalog_domain.infrastructure.web.app import create_app


@pytest.fixture(autouse=True)
def mock_settings_web(mocker) -> None:
    """Pins the settings the web layer reads, independent of any local .env file."""
    mocker.patch.object(settings, "API_BASE_PATH", "/api/v1")
    mocker.patch.object(settings, "DEFAULT_PAGE_LIMIT", 10)


@pytest.fixture
def mock_product_repository() -> Mock:
    """Mock for MySQLProductRepository."""
    # We specify the actual class for a more accurate mock spec
    return Mock(spec=MySQLProductRepository)


@pytest.fixture
def in_memory_product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def sample_product() -> Product:
    """A valid, disabled product."""
    return Product(name="Product 1", description="Product 1 description", price=99.90)


@pytest.fixture
def sample_product_input_dto() -> ProductInputDTO:
    return ProductInputDTO(name="Keyboard", description="Mechanical keyboard", price=120.0)


@pytest.fixture
def five_products() -> list[Product]:
    """Five products with distinct names and prices, deliberately not in price order."""
    return [
        Product(name="Delta", description="", price=40.0),
        Product(name="alpha", description="", price=10.0),
        Product(name="Echo", description="", price=0.0),
        Product(name="Charlie", description="", price=30.0),
        Product(name="bravo", description="", price=25.5),
    ]


@pytest.fixture
def populated_repository(in_memory_product_repository, five_products) -> InMemoryProductRepository:
    for product in five_products:
        in_memory_product_repository.create(product)
    return in_memory_product_repository


@pytest.fixture
def client(in_memory_product_repository) -> TestClient:
    """HTTP client for an app backed by an empty in-memory repository."""
    return TestClient(create_app(in_memory_product_repository))
