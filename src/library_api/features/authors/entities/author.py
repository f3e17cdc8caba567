"""Author domain entity."""

from dataclasses import dataclass, field
from datetime import date
from typing import List
from uuid import UUID, uuid4

from ...books.entities import Book


@dataclass
class Author:
    """Author domain entity.

    Storage record for an author; ``name`` and ``age`` exposed by the API
    are derived from these fields.
    """

    first_name: str
    last_name: str
    date_of_birth: date
    genre: str
    id: UUID = field(default_factory=uuid4)
    books: List[Book] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        """Get the display name."""
        return f"{self.first_name} {self.last_name}"

    def add_book(self, book: Book) -> None:
        """Attach a book to this author."""
        book.author_id = self.id
        self.books.append(book)
