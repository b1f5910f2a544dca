import logging
from contextlib import asynccontextmanager
from urllib.parse import urlsplit

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agld.application.api.errors import error_body, map_agld_error
from agld.application.api.rest.routes import beads, health, root
from agld.application.di import create_container
from agld.config import Config, configure_logging
from agld.domain.shared.error import AgldError, InfrastructureError
from agld.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    yield
    logger.info("Shutting down, closing ledger transport")
    await container.close()


def _log_startup(config: Config) -> None:
    logger.info("Starting %s v%s", config.server.name, config.server.version)
    # Only the host is logged; RPC URLs commonly embed an API key in the path
    rpc_host = urlsplit(config.ledger.rpc_url).netloc if config.ledger.rpc_url else None
    logger.info("Ledger endpoint: %s (%s)", rpc_host or "Not configured", config.ledger.network)
    logger.info("Contract: %s", config.ledger.contract_address or "Not configured")


def create_app(
    config: Config | None = None,
    container: AsyncContainer | None = None,
) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    _log_startup(config)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup dependency injection
    setup_dishka(container or create_container(config), app_instance)

    # Fixed paths first so they are never captured by /{bead_id}
    app_instance.include_router(root.router)
    app_instance.include_router(health.router)
    app_instance.include_router(beads.router)

    # Global AGLD error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(AgldError)
    async def agld_error_handler(request: Request, exc: AgldError):
        if isinstance(exc, InfrastructureError):
            logger.warning("%s on %s %s", exc.code, request.method, request.url.path)
        return map_agld_error(exc)

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=error_body("internal_error", "Internal server error"),
        )

    return app_instance
