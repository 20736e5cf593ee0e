"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from macro_tracker.api.routes import router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import InvalidArgumentError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(router)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
