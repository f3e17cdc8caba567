"""
Engine configuration built once at startup.

Holds the read-only sort mapping registry and paging limits that request
handlers receive through dependency injection.
"""
import logging
from dataclasses import dataclass

from ..config.settings import LibrarySettings
from ..features.authors.models import AuthorDto
from ..features.authors.services import build_author_sort_table
from ..features.books.models import BookDto
from ..features.books.services import build_book_sort_table
from ..features.sorting import SortMappingRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Process-wide, read-only configuration of the shaping/paging engine."""

    sort_registry: SortMappingRegistry
    default_page_size: int
    max_page_size: int


def build_sort_registry() -> SortMappingRegistry:
    """Build the sort mapping tables of every sortable resource shape."""
    return SortMappingRegistry({
        AuthorDto: build_author_sort_table(),
        BookDto: build_book_sort_table(),
    })


def build_engine_config(settings: LibrarySettings) -> EngineConfig:
    """Create the engine configuration from settings."""
    registry = build_sort_registry()
    logger.info(
        f"Engine configured: {len(registry)} sort table(s), "
        f"page size {settings.default_page_size} (max {settings.max_page_size})"
    )
    return EngineConfig(
        sort_registry=registry,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
