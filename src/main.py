import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import SecurityHeadersMiddleware
from src.api.router import api_router
from src.utils.logger import setup_logging
from src.utils.settings import Settings, load_settings


def create_app(settings: Settings) -> FastAPI:
    """Build the relay around an already-validated settings object."""
    is_production = settings.app.is_production

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger = setup_logging(is_production)
        logger.info(
            "Starting rank relay",
            environment=settings.app.ENVIRONMENT,
            cloud_base_url=settings.cloud.CLOUD_BASE_URL,
        )

        yield

        logger.info("Shutting down rank relay")

    app = FastAPI(
        title="Rank Relay",
        description="Sets player roles in Roblox groups on behalf of a game server",
        version=settings.app.API_VERSION,
        lifespan=lifespan,
        # Security: Disable docs in production
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.state.settings = settings

    # Register global exception handlers
    register_exception_handlers(app)

    app.add_middleware(
        SecurityHeadersMiddleware,
        api_version=settings.app.API_VERSION,
        is_production=is_production,
    )
    app.middleware("http")(logging_middleware)

    app.include_router(api_router)

    return app


def build_app() -> FastAPI:
    """App factory for uvicorn; fails fast when required settings are missing."""
    return create_app(load_settings())


def run_dev_server():
    """Run development server with auto-reload."""
    settings = load_settings()
    uvicorn.run(
        "src.main:build_app",
        factory=True,
        host=settings.app.HOST,
        port=settings.app.PORT,
        reload=True,
        access_log=False,
    )


def run_prod_server():
    """Run production server."""
    settings = load_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.app.HOST,
        port=settings.app.PORT,
        reload=False,
        access_log=False,
    )


if __name__ == "__main__":
    run_prod_server()
