"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from credo import __version__
from credo.api.dependencies import close_registrar, init_registrar
from credo.api.models import APIResponse, WelcomeResponse
from credo.api.routes import courses, students
from credo.config import CredoConfig
from credo.registry import RegistryError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    config = app.state.config if hasattr(app.state, "config") else CredoConfig()
    init_registrar(config)
    logger.info("Registrar ready for %s", config.university)

    yield
    # Shutdown
    close_registrar()


def create_app(config: CredoConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = CredoConfig()

    app = FastAPI(
        title=f"{config.university} Documentation",
        description=f"REST API for {config.university} course enrollment",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(RegistryError)
    async def registry_error_handler(_request: Request, exc: RegistryError) -> JSONResponse:
        logger.error("Registry error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    @app.get("/", response_model=WelcomeResponse, tags=["root"])
    def welcome() -> WelcomeResponse:
        """Greet the caller."""
        return WelcomeResponse(message=f"Welcome to {config.university}")

    # Include routers
    app.include_router(courses.router)
    app.include_router(students.router)

    return app


# Default app instance
app = create_app()
