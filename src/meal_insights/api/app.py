"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_insights.api.routes import router as insights_router
from meal_insights.app_logging import configure_logging
from meal_insights.containers import AppContainer
from meal_insights.services.errors import UpstreamFetchError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(insights_router)

    @app.exception_handler(UpstreamFetchError)
    async def upstream_fetch_error(
        request: Request, exc: UpstreamFetchError
    ) -> JSONResponse:
        logger.warning(
            "Request failed reading upstream data",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
