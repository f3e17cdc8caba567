"""Explicit mappings between book entities and book DTOs."""

from typing import Any, Dict, Optional
from uuid import UUID

from ..entities import Book
from ..models import BookDto, BookForManipulationDto


def to_book_dto(book: Book) -> BookDto:
    """Map a book entity to its API representation."""
    return BookDto(
        id=book.id,
        title=book.title,
        description=book.description,
        author_id=book.author_id,
    )


def to_book_entity(dto: BookForManipulationDto, book_id: Optional[UUID] = None) -> Book:
    """Map a create/update payload to a new book entity."""
    book = Book(title=dto.title, description=dto.description)
    if book_id is not None:
        book.id = book_id
    return book


def to_book_patch_document(book: Book) -> Dict[str, Any]:
    """Map a stored book to the document a patch is applied to."""
    return {"title": book.title, "description": book.description}


def apply_book_update(dto: BookForManipulationDto, book: Book) -> Book:
    """Copy update payload fields onto an existing book entity."""
    book.title = dto.title
    book.description = dto.description
    return book
