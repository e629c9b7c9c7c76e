"""FastAPI app entry point for the aftermarket mock parts API."""

import asyncio
import random
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from aftermarket_api.api.errors import (
    ApiError,
    api_error_handler,
    http_error_handler,
    server_error_body,
)
from aftermarket_api.api.routes import router
from aftermarket_api.config import Settings, get_settings
from aftermarket_api.logging import (
    log_error,
    log_request,
    log_response,
    logger,
    setup_logging,
)
from aftermarket_api.services.fixtures import FixtureStore, load_fixtures


def _cors_headers(settings: Settings, origin: Optional[str]) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Methods": settings.allowed_methods,
        "Access-Control-Allow-Headers": settings.allowed_headers,
    }
    origins = settings.cors_origins
    if "*" in origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers


def latency_seconds(settings: Settings) -> float:
    """Random per-request delay simulating a remote backend."""
    return random.uniform(settings.latency_min_ms, settings.latency_max_ms) / 1000


def create_app(
    settings: Settings | None = None,
    store: FixtureStore | None = None,
) -> FastAPI:
    """Build the app around an injected settings object and fixture store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if store is None:
        store = load_fixtures(settings.fixture_set)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown."""
        logger.info(
            f"Mock parts API ready: fixtures={store.name} "
            f"latency={'on' if settings.latency_enabled else 'off'}"
        )
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title="Aftermarket Mock Parts API",
        description="Fixture-backed suppliers, OEM catalog, cross-references and offers",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.middleware("http")
    async def mock_transport(request: Request, call_next):
        """CORS on every reply, preflight short-circuit, simulated latency, 500s."""
        cors = _cors_headers(settings, request.headers.get("origin"))

        if request.method == "OPTIONS":
            return Response(
                status_code=200, headers=cors, media_type="application/json"
            )

        start = time.time()
        log_request(request.method, request.url.path)

        if settings.latency_enabled:
            await asyncio.sleep(latency_seconds(settings))

        try:
            response = await call_next(request)
        except Exception as e:
            log_error("Unhandled error", e, path=request.url.path)
            response = JSONResponse(status_code=500, content=server_error_body(e))

        response.headers.update(cors)
        duration_ms = (time.time() - start) * 1000
        log_response(request.method, request.url.path, response.status_code, duration_ms)
        return response

    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "aftermarket-mock-api", "fixtures": store.name}

    return app


app = create_app()
