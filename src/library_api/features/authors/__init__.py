"""Authors feature: entities, DTOs, mappers and sort table.

Routers live in ``features.authors.routers`` and are imported by the
application factory.
"""

from .entities import Author
from .models import AuthorDto, AuthorForCreationDto
from .services import build_author_sort_table, to_author_dto, to_author_entity

__all__ = [
    "Author",
    "AuthorDto",
    "AuthorForCreationDto",
    "to_author_dto",
    "to_author_entity",
    "build_author_sort_table",
]
