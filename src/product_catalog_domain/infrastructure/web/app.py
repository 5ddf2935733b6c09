# src/product_catalog_domain/infrastructure/web/app.py
"""FastAPI application factory for the Product catalog service."""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import (
    ApplicationError,
    NotFoundError,
    ValidationError,
)
from src.product_catalog_domain.domain.repositories.product_repository import IProductRepository
from src.product_catalog_domain.infrastructure.web.product_routes import router as product_router

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


def register_exception_handlers(app: FastAPI) -> None:
    """Maps application errors to HTTP responses: validation 400, not found 404, everything else 500."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message} ({exc.code})")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, code=exc.code)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        logger.error(f"Error executing {request.method} {request.url.path}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Error decoding request body for {request.method} {request.url.path}: {exc.errors()}")
        return _error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")


def create_app(product_repo: IProductRepository) -> FastAPI:
    """Builds the application around an already constructed repository."""
    app = FastAPI(
        title="Product Service API",
        version="1.0",
        description="This is a product microservice API.",
        docs_url="/swagger",
        openapi_url="/swagger/doc.json",
        redoc_url=None,
    )
    app.state.product_repo = product_repo

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.1f}ms")
        return response

    register_exception_handlers(app)
    app.include_router(product_router, prefix=settings.API_BASE_PATH)
    return app
