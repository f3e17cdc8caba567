"""Explicit mappings between author entities and author DTOs."""

from datetime import date
from typing import Optional

from ....utils.dates import get_current_age
from ...books.services.mappers import to_book_entity
from ..entities import Author
from ..models import AuthorDto, AuthorForCreationDto


def to_author_dto(author: Author, today: Optional[date] = None) -> AuthorDto:
    """Map an author entity to its API representation."""
    return AuthorDto(
        id=author.id,
        name=author.full_name,
        age=get_current_age(author.date_of_birth, today),
        genre=author.genre,
    )


def to_author_entity(dto: AuthorForCreationDto) -> Author:
    """Map a creation payload (with nested books) to a new author entity."""
    author = Author(
        first_name=dto.first_name,
        last_name=dto.last_name,
        date_of_birth=dto.date_of_birth,
        genre=dto.genre,
    )
    for book in dto.books:
        author.add_book(to_book_entity(book))
    return author
