"""Library API application factory.

Builds the FastAPI application, its engine configuration and in-memory
store, and mounts the resource routers under the configured prefix.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..common import build_engine_config
from ..config import LibrarySettings, get_settings
from ..features.author_collections.routers import router as author_collections_router
from ..features.authors.routers import router as authors_router
from ..features.books.routers import router as books_router
from ..repositories import LibraryRepository, build_seed_authors
from .exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: LibrarySettings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version} "
        f"({settings.environment})"
    )

    yield

    logger.info(f"Stopping {settings.app_name}")


def create_app(
    settings: Optional[LibrarySettings] = None,
    repository: Optional[LibraryRepository] = None
) -> FastAPI:
    """Create the Library API application.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        repository: Store to serve, defaults to a (optionally seeded) in-memory store

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Configured before startup; ASGI test transports may skip lifespan events
    app.state.settings = settings
    app.state.engine = build_engine_config(settings)
    if repository is None:
        repository = LibraryRepository(build_seed_authors() if settings.seed_data else None)
    app.state.repository = repository

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(authors_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)
    app.include_router(author_collections_router, prefix=settings.api_prefix)

    logger.debug(f"Routers mounted under '{settings.api_prefix}'")
    return app
