"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from labor_cost_engine import __version__
from labor_cost_engine.api.dependencies import InvalidYearError
from labor_cost_engine.api.routes import calculator_router, health_router, salaries_router
from labor_cost_engine.calculators.exceptions import (
    ConfigurationError,
    InvalidInputError,
    InvalidRoleError,
)
from labor_cost_engine.database import dispose_db, init_db
from labor_cost_engine.services.config_resolver import ConfigNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    init_db()
    yield
    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Labor Cost Engine API",
        description="Colombian labor cost and salary query API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidRoleError)
    async def invalid_role_handler(request: Request, exc: InvalidRoleError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": str(exc),
                "code": "INVALID_ROLE",
                "valid_roles": exc.valid_roles,
            },
        )

    @app.exception_handler(InvalidYearError)
    async def invalid_year_handler(request: Request, exc: InvalidYearError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "code": "INVALID_YEAR"},
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "code": "INVALID_INPUT"},
        )

    @app.exception_handler(ConfigNotFoundError)
    async def config_not_found_handler(
        request: Request, exc: ConfigNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "code": "CONFIG_NOT_FOUND"},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Invalid salary configuration: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "code": "CONFIGURATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(salaries_router, prefix="/api/v1")
    app.include_router(calculator_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
