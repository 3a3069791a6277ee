"""Main FastAPI application for Joke Gateway."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from joke_gateway.api_v1.jokes import router as jokes_router
from joke_gateway.api_v1.schemas import ErrorResponse, HealthResponse
from joke_gateway.core.config import get_settings
from joke_gateway.core.container import shutdown_container
from joke_gateway.core.logging_config import configure_logging
from joke_gateway.core.middleware.response_write import ResponseWriteGuardMiddleware
from joke_gateway.core.middleware.trace_id import TraceIdMiddleware

# Configure logging based on environment settings early during startup.
# Invalid settings raise ConfigurationError here, before any request is served.
settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events for the application.
    """
    # Startup
    logger.info("Starting Joke Gateway...")
    logger.info(
        "Upstreams: name_service=%s joke_service=%s",
        settings.name_service.url,
        settings.joke_service.url,
    )
    logger.info("Joke Gateway started on %s:%s", settings.host, settings.port)

    yield

    # Shutdown
    logger.info("Shutting down Joke Gateway...")
    await shutdown_container()
    logger.info("Joke Gateway shut down complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Tells a joke about a random person",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ========================================
    # Middleware
    # ========================================

    app.add_middleware(TraceIdMiddleware)
    # Outermost, so it also covers headers added by the middleware above
    app.add_middleware(ResponseWriteGuardMiddleware)

    # ========================================
    # Routers
    # ========================================

    app.include_router(jokes_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """
        Health check endpoint.

        Reports configuration only; upstream services are not called.
        """
        return HealthResponse(
            status="healthy",
            version=settings.app_version,
            services={
                "name_service": settings.name_service.url,
                "joke_service": settings.joke_service.url,
            },
        )

    # ========================================
    # Exception Handlers
    # ========================================

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                detail="Internal server error", type="internal_error"
            ).model_dump(),
        )

    return app


# Create application instance
app = create_app()


def run() -> None:
    """
    Run the application using uvicorn.

    For development: python -m joke_gateway.main
    For production: joke-gateway, or uvicorn directly
    """
    import uvicorn

    uvicorn.run(
        "joke_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
