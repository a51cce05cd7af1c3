"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from goloyal.api.demo_requests import router as demo_requests_router
from goloyal.config import settings
from goloyal.errors import register_error_handlers
from goloyal.landing.router import STATIC_DIR, router as landing_router
from goloyal.middleware.request_logger import request_logger_middleware
from goloyal.repositories.base import Storage
from goloyal.repositories.memory import MemoryStorage

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer() if settings.is_development
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info(
        "app_starting",
        environment=settings.environment,
        port=settings.port,
    )
    yield
    logger.info(
        "app_shutting_down",
        demo_requests=await app.state.storage.count_demo_requests(),
    )


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the application around a record store.

    Args:
        storage: Store to use; a fresh MemoryStorage when omitted

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Landing page and demo request intake for digital loyalty cards",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else MemoryStorage()

    app.middleware("http")(request_logger_middleware)
    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(demo_requests_router)
    # Catch-all page route goes last
    app.include_router(landing_router)

    return app


app = create_app()


def run() -> None:
    """Run the server with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
