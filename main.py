"""Main application entry point for the Product catalog service."""

import logging

import uvicorn

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError
from src.common.logger_config import setup_logging
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository
from src.product_catalog_domain.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from src.product_catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLProductRepository,
)
from src.product_catalog_domain.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


def setup_product_dependencies() -> IProductRepository:
    """Initializes the product repository selected by PRODUCT_REPOSITORY."""
    backend = settings.PRODUCT_REPOSITORY.lower()
    if backend == "memory":
        logger.warning("Using the in-memory product repository; data is lost on shutdown.")
        return InMemoryProductRepository()
    if backend != "mysql":
        raise ValueError(f"Unknown PRODUCT_REPOSITORY '{settings.PRODUCT_REPOSITORY}' (expected 'mysql' or 'memory')")

    product_repository = MySQLProductRepository()
    product_repository.create_tables()  # Idempotent
    return product_repository


def main() -> None:
    setup_logging()
    try:
        product_repository = setup_product_dependencies()
    except DatabaseError as e:
        logger.error(f"Error preparing product storage: {e}")
        raise

    app = create_app(product_repository)
    logger.info(f"Starting web server on {settings.WEB_SERVER_HOST}:{settings.WEB_SERVER_PORT}")
    uvicorn.run(app, host=settings.WEB_SERVER_HOST, port=settings.WEB_SERVER_PORT, log_config=None)


if __name__ == "__main__":
    main()
