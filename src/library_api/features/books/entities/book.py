"""Book domain entity."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Book:
    """Book domain entity.

    Storage record for a book written by one author.
    """

    title: str
    author_id: Optional[UUID] = None
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
