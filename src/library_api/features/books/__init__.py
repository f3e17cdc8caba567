"""Books feature: entities, DTOs, mappers, business rules and sort table."""

from .entities import Book
from .models import BookDto, BookForCreationDto, BookForUpdateDto, JsonPatchOperation
from .services import build_book_sort_table, to_book_dto, to_book_entity

__all__ = [
    "Book",
    "BookDto",
    "BookForCreationDto",
    "BookForUpdateDto",
    "JsonPatchOperation",
    "to_book_dto",
    "to_book_entity",
    "build_book_sort_table",
]
