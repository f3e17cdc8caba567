"""Repositories for the Library API."""

from .library_repository import AuthorFilter, LibraryRepository, apply_ordering
from .seed import build_seed_authors

__all__ = [
    "AuthorFilter",
    "LibraryRepository",
    "apply_ordering",
    "build_seed_authors",
]
