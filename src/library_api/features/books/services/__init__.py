"""Book services."""

from .mappers import apply_book_update, to_book_dto, to_book_entity, to_book_patch_document
from .sort_mappings import build_book_sort_table
from .validation import apply_book_patch, ensure_description_differs_from_title

__all__ = [
    "to_book_dto",
    "to_book_entity",
    "to_book_patch_document",
    "apply_book_update",
    "build_book_sort_table",
    "ensure_description_differs_from_title",
    "apply_book_patch",
]
