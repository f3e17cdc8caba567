"""Components shared by the routers: engine configuration, dependencies, responses."""

from .dependencies import get_engine_config, get_library_repository, get_link_composer
from .engine import EngineConfig, build_engine_config, build_sort_registry
from .responses import (
    PAGINATION_HEADER,
    collection_response,
    created_response,
    no_content_response,
    self_href,
)

__all__ = [
    "EngineConfig",
    "build_engine_config",
    "build_sort_registry",
    "get_engine_config",
    "get_library_repository",
    "get_link_composer",
    "PAGINATION_HEADER",
    "collection_response",
    "created_response",
    "no_content_response",
    "self_href",
]
