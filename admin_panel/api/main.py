"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, owns the database engine
lifecycle. admin_panel.main serves it under uvicorn.

Dependencies: fastapi, sqlalchemy, admin_panel.api.routers
System role: API assembly and lifecycle
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from admin_panel.boundary.db import (
    create_all_tables,
    create_async_engine_from_settings,
    create_session_factory,
)
from admin_panel.configs import Settings, get_settings
from admin_panel.observability.logger import configure_logging
from admin_panel.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .exception_handlers import register_exception_handlers
from .routers import health_router, mentor_reviews_router, projects_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup builds the engine and session factory and ensures the tables
    exist. A store that is down at startup is logged, not fatal: the API
    still comes up and data routes fail until the store is reachable.
    Shutdown disposes the connection pool.
    """
    settings: Settings = app.state.settings
    if app.state.configure_logging:
        configure_logging(settings.log_level)

    # Startup
    engine = create_async_engine_from_settings(settings.database)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    try:
        await create_all_tables(engine)
        logger.info("Database initialized or already present")
    except (SQLAlchemyError, OSError):
        logger.exception("Error connecting to the database during init")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Database engine disposed")


def create_app(
    settings: Settings | None = None,
    configure_logs: bool = True,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to run with (defaults to the environment's)
        configure_logs: Install the root log handler on startup

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Admin Panel API",
        description="Projects and mentor reviews administration",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.configure_logging = configure_logs

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (correlation outermost so request logs carry the id)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    for router in (projects_router, mentor_reviews_router):
        app.include_router(router)
        # The admin UI calls the same routes under /api
        app.include_router(router, prefix=settings.server.api_prefix, include_in_schema=False)

    return app


app = create_app()

