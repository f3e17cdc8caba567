"""Book entities."""

from .book import Book

__all__ = ["Book"]
