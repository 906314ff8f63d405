"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shorturl_app.api import landing, redirect, urls
from shorturl_app.config import Settings
from shorturl_app.database.connection import create_db_engine
from shorturl_app.errors import register_exception_handlers
from shorturl_app.middleware import LoggingMiddleware
from shorturl_app.rate_limit import install_rate_limiter
from shorturl_app.services.short_code import RandomShortCodeStrategy
from shorturl_app.services.url_service import URLService
from shorturl_app.services.url_store import UrlStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Closing database connections")
    app.state.engine.dispose()


def create_app(settings: Settings) -> FastAPI:
    """Create and configure the FastAPI application.

    The schema is created before the app is returned, so a storage problem
    surfaces here (as StorageError) rather than on the first request.

    Args:
        settings: Configuration instance

    Returns:
        Configured FastAPI app
    """
    engine = create_db_engine(
        settings.database_path,
        pool_size=settings.pool_size,
        pool_timeout=settings.pool_timeout,
        max_overflow=settings.pool_max_overflow,
    )
    store = UrlStore(
        engine,
        generator=RandomShortCodeStrategy(length=settings.short_code_length),
        max_retries=settings.max_retries,
    )

    logger.info("Preparing database at %s", settings.database_path)
    try:
        store.ensure_schema()
    except Exception:
        engine.dispose()
        raise

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A URL shortener service built with FastAPI",
        lifespan=lifespan,
    )

    # Explicit dependencies for the handlers, see dependencies.py
    app.state.settings = settings
    app.state.engine = engine
    app.state.url_service = URLService(store)

    # Added last = outermost, so rate-limited requests are logged as well
    install_rate_limiter(app, settings)
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(landing.router)
    app.include_router(urls.router)
    app.include_router(redirect.router)

    return app
