"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from lifestyle_tracker.api.lifestyle import router as lifestyle_router
from lifestyle_tracker.app_logging import configure_logging, log_level_for
from lifestyle_tracker.containers import AppContainer
from lifestyle_tracker.domain.errors import InvalidRangeError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(log_level_for(container.settings.environment))
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Lifestyle Tracker")
    app.state.container = container

    app.include_router(lifestyle_router)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("Not found: %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidRangeError)
    async def invalid_range(request: Request, exc: InvalidRangeError) -> JSONResponse:
        logger.info("Invalid range: %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
