"""Common FastAPI dependencies backed by application state."""

from fastapi import Request

from ..features.links import LinkComposer, RequestUrlBuilder
from ..repositories import LibraryRepository
from .engine import EngineConfig


async def get_engine_config(request: Request) -> EngineConfig:
    """Get the engine configuration built at startup."""
    return request.app.state.engine


async def get_library_repository(request: Request) -> LibraryRepository:
    """Get the repository attached to the application."""
    return request.app.state.repository


async def get_link_composer(request: Request) -> LinkComposer:
    """Get a link composer resolving routes against the current request."""
    return LinkComposer(RequestUrlBuilder(request))
