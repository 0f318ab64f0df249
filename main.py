"""
SanctoMind Counselling API
FastAPI relay between the web client, Gemini and the PostgreSQL datastore.
"""
import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.config.database import dispose_engine
from src.config.settings import Settings, get_settings
from src.api.routers import api_router, root_router
from src.middleware.request_logging import RequestLoggingMiddleware
from src.middleware.error_handling import (
    ErrorHandlingMiddleware,
    request_validation_handler,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    settings = get_settings()
    logging.info(f"Starting {settings.app_name} ({settings.environment})")

    # A missing key only fails the generation endpoints, not startup
    if not settings.gemini_api_key:
        logging.error("GEMINI_API_KEY is missing. Check apikey.env file.")
    else:
        logging.info("GEMINI_API_KEY loaded successfully.")

    if not settings.db_url:
        logging.warning("DB_URL is not set; /api/test-db will report failure")

    yield

    # Shutdown
    logging.info("Shutting down...")
    await dispose_engine()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        description="Mental health counselling relay backed by Gemini",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_middleware(ErrorHandlingMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router, prefix="/api")
    app.include_router(root_router)

    # Web client: index.html at "/", other assets beside it
    static_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), settings.static_dir)
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_local,
    )
