"""Coffee Valley API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CoffeeValleyError → structured JSON responses
    - CORS allows the configured origins and headers (defaults: any origin;
      Origin, Content-Type, Accept, Authorization)
    - Database pool opened and tables synchronized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DB handle reaches handlers through Depends(get_db), one session per request
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coffee_valley.api.error_handlers import register_error_handlers
from coffee_valley.api.routes import beans, distributors, documents, health, users
from coffee_valley.config import get_settings
from coffee_valley.infrastructure.database import close_db, init_db
from coffee_valley.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    logger.info("Coffee Valley API started")
    yield
    await close_db()
    logger.info("Coffee Valley API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Coffee Valley API", version="1.0.0", lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=settings.cors_allow_headers,
    )

    # Routes - explicit registration
    application.include_router(health.router)
    application.include_router(beans.router)
    application.include_router(distributors.router)
    application.include_router(documents.router)
    application.include_router(users.router)

    register_error_handlers(application)
    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "coffee_valley.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
