"""
In-memory library repository.

Plays the role of the query layer for the API: it filters, orders, counts
and slices authors and books. Counting and slicing are separate calls, the
same way a database-backed repository issues two queries.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence
from uuid import UUID

from ..core.exceptions import ResourceConflictError
from ..features.authors.entities import Author
from ..features.books.entities import Book
from ..features.pagination import SortField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorFilter:
    """Filtering criteria for author queries."""

    genre: Optional[str] = None
    search_query: Optional[str] = None

    def matches(self, author: Author) -> bool:
        """Check if an author satisfies the filter (case-insensitive)."""
        if self.genre and author.genre.lower() != self.genre.strip().lower():
            return False
        if self.search_query:
            needle = self.search_query.strip().lower()
            haystack = (author.genre, author.first_name, author.last_name)
            if not any(needle in value.lower() for value in haystack):
                return False
        return True


def _sort_key(sort_field: SortField):
    def key(row: Any):
        value = getattr(row, sort_field.field)
        # Sorted with reverse=True for descending, so flip the null flag
        is_null = value is None if not sort_field.descending else value is not None
        if sort_field.nulls_last:
            return (is_null, value)
        return (not is_null, value)
    return key


def apply_ordering(rows: Iterable[Any], sort_fields: Sequence[SortField]) -> List[Any]:
    """Order rows by several storage fields (first field has priority)."""
    ordered = list(rows)
    for sort_field in reversed(sort_fields):
        ordered.sort(key=_sort_key(sort_field), reverse=sort_field.descending)
    return ordered


class LibraryRepository:
    """Thread-safe in-memory store of authors and their books."""

    def __init__(self, authors: Optional[Iterable[Author]] = None):
        self._lock = threading.RLock()
        self._authors: List[Author] = list(authors or [])

    def _snapshot(self) -> List[Author]:
        with self._lock:
            return list(self._authors)

    # Authors

    def count_authors(self, author_filter: Optional[AuthorFilter] = None) -> int:
        """Count authors matching the filter."""
        author_filter = author_filter or AuthorFilter()
        return sum(1 for author in self._snapshot() if author_filter.matches(author))

    def list_authors(
        self,
        author_filter: Optional[AuthorFilter] = None,
        sort_fields: Sequence[SortField] = (),
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Author]:
        """Filter, order and slice authors."""
        author_filter = author_filter or AuthorFilter()
        rows = [author for author in self._snapshot() if author_filter.matches(author)]
        rows = apply_ordering(rows, sort_fields)
        end = None if limit is None else offset + limit
        return rows[offset:end]

    def get_author(self, author_id: UUID) -> Optional[Author]:
        """Get an author by id."""
        for author in self._snapshot():
            if author.id == author_id:
                return author
        return None

    def get_authors(self, author_ids: Iterable[UUID]) -> List[Author]:
        """Get the authors with the given ids, ordered by name."""
        wanted = set(author_ids)
        rows = [author for author in self._snapshot() if author.id in wanted]
        return apply_ordering(rows, [SortField("first_name"), SortField("last_name")])

    def author_exists(self, author_id: UUID) -> bool:
        """Check if an author exists."""
        return self.get_author(author_id) is not None

    def add_author(self, author: Author) -> Author:
        """Store a new author together with its books."""
        with self._lock:
            for book in author.books:
                book.author_id = author.id
            self._authors.append(author)
        logger.info(f"Added author {author.id} with {len(author.books)} book(s)")
        return author

    def delete_author(self, author: Author) -> None:
        """Remove an author and, with it, the author's books."""
        with self._lock:
            self._authors = [existing for existing in self._authors if existing.id != author.id]
        logger.info(f"Deleted author {author.id}")

    # Books

    def count_books_for_author(self, author_id: UUID) -> int:
        """Count the books of an author."""
        author = self.get_author(author_id)
        return len(author.books) if author else 0

    def list_books_for_author(
        self,
        author_id: UUID,
        sort_fields: Sequence[SortField] = (),
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Book]:
        """Order and slice the books of an author."""
        author = self.get_author(author_id)
        if author is None:
            return []
        with self._lock:
            rows = list(author.books)
        rows = apply_ordering(rows, sort_fields)
        end = None if limit is None else offset + limit
        return rows[offset:end]

    def get_book_for_author(self, author_id: UUID, book_id: UUID) -> Optional[Book]:
        """Get one book of an author."""
        author = self.get_author(author_id)
        if author is None:
            return None
        with self._lock:
            for book in author.books:
                if book.id == book_id:
                    return book
        return None

    def find_book(self, book_id: UUID) -> Optional[Book]:
        """Get a book by id, whichever author it belongs to."""
        with self._lock:
            for author in self._authors:
                for book in author.books:
                    if book.id == book_id:
                        return book
        return None

    def add_book_for_author(self, author_id: UUID, book: Book) -> Book:
        """Attach a new book to an existing author.

        Raises:
            KeyError: If the author does not exist
            ResourceConflictError: If the book id is already taken
        """
        author = self.get_author(author_id)
        if author is None:
            raise KeyError(f"Author {author_id} does not exist")
        with self._lock:
            if self.find_book(book.id) is not None:
                raise ResourceConflictError("Book", book.id)
            author.add_book(book)
        logger.info(f"Added book {book.id} for author {author_id}")
        return book

    def update_book_for_author(self, book: Book) -> Book:
        """Persist changes made to a book (entities are updated in place)."""
        logger.info(f"Updated book {book.id} for author {book.author_id}")
        return book

    def delete_book(self, book: Book) -> None:
        """Remove a book from its author."""
        author = self.get_author(book.author_id)
        if author is None:
            return
        with self._lock:
            author.books = [existing for existing in author.books if existing.id != book.id]
        logger.info(f"Deleted book {book.id} for author {book.author_id}")
