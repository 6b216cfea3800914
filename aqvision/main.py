"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import httpx
import logging

from aqvision import __version__
from aqvision.config import Settings, settings
from aqvision.core.credentials import CredentialSet
from aqvision.core.errors import GatewayError
from aqvision.models.credentials import HealthResponse
from aqvision.api.dependencies import build_upstreams

# Import routers individually to avoid circular imports
from aqvision.api.environment import router as environment_router
from aqvision.api.summary import router as summary_router
from aqvision.api.maps import router as maps_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Builds the gateway. `transport` replaces the network for the shared HTTP client."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Resolves credentials and opens the shared HTTP client."""
        logger.info("Starting AQ-Vision gateway")
        credentials = CredentialSet.from_settings(app_settings)
        for status in credentials.statuses():
            if status.configured:
                logger.info(
                    f"{status.name.upper()}: set ({status.length} chars, {status.source.value})"
                )
            else:
                logger.warning(f"{status.name.upper()}: missing")

        async with httpx.AsyncClient(
            timeout=app_settings.upstream_timeout,
            follow_redirects=True,
            transport=transport,
        ) as http:
            app.state.upstreams = build_upstreams(app_settings, credentials, http)
            yield

        logger.info("Shutting down AQ-Vision gateway")

    app = FastAPI(
        title="AQ-Vision Gateway",
        description="Air quality, weather, maps and AI summaries behind one API",
        version=__version__,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(environment_router)
    app.include_router(summary_router)
    app.include_router(maps_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Reports which upstream credentials are configured."""
        return HealthResponse(
            status="healthy",
            credentials=request.app.state.upstreams.credentials.statuses(),
        )

    if app_settings.static_dir:
        static_path = Path(app_settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        else:
            logger.warning(f"Static directory {static_path} not found, not serving it")

    return app


app = create_app()
