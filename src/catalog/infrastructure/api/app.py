"""FastAPI application factory.

The repository is passed in rather than created here, so tests and the
composition root decide which store the app serves.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.domain.exceptions import (
    DomainException,
    DuplicateIdentifierError,
    EntityNotFoundError,
)
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.routes import router as products_router
from catalog.infrastructure.config import Settings

logger = logging.getLogger(__name__)


def create_app(repository: ProductRepository, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Product Catalog API",
        description="Financial products catalog: cards, accounts, loans, insurance",
        version="1.0.0",
    )
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products_router, prefix=settings.route_prefix)
    _register_exception_handlers(app)

    logger.info(
        "Products API ready at prefix %r (%d product(s) loaded)",
        settings.route_prefix or "/",
        len(repository.list_all()),
    )
    return app


def _error(status_code: int, name: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"name": name, "message": message, **extra},
    )


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(EntityNotFoundError)
    async def not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error(404, "NotFoundError", str(exc))

    @app.exception_handler(DuplicateIdentifierError)
    async def duplicate(request: Request, exc: DuplicateIdentifierError) -> JSONResponse:
        logger.info("Rejected duplicate product on %s %s", request.method, request.url.path)
        return _error(400, "BadRequestError", str(exc))

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException) -> JSONResponse:
        return _error(400, "BadRequestError", str(exc))

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"][1:]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return _error(
            400,
            "BadRequestError",
            "Invalid body, check 'errors' property for more info.",
            errors=errors,
        )
