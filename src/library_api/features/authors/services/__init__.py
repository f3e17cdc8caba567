"""Author services."""

from .mappers import to_author_dto, to_author_entity
from .sort_mappings import build_author_sort_table

__all__ = ["to_author_dto", "to_author_entity", "build_author_sort_table"]
