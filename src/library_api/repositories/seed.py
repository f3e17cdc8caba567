"""
Seed data for the in-memory library store.
"""
from datetime import date
from typing import List
from uuid import UUID

from ..features.authors.entities import Author
from ..features.books.entities import Book


def _author(author_id: str, first_name: str, last_name: str, born: date, genre: str, books) -> Author:
    author = Author(
        id=UUID(author_id),
        first_name=first_name,
        last_name=last_name,
        date_of_birth=born,
        genre=genre,
    )
    for book_id, title, description in books:
        author.add_book(Book(id=UUID(book_id), title=title, description=description))
    return author


def build_seed_authors() -> List[Author]:
    """Fresh author/book records used to populate a new store."""
    return [
        _author(
            "25320c5e-f58a-4b1f-b63a-8ee07a840bdf", "Stephen", "King", date(1947, 9, 21), "Horror",
            [
                ("c7ba6add-09c4-45f8-8dd0-eaca221e5d93", "The Shining",
                 "The Shining is a horror novel by American author Stephen King."),
                ("a3749477-f823-4124-aa4a-fc9ad5e79cd6", "Misery",
                 "Misery is a psychological thriller about an author held captive by a fan."),
                ("70a1f9b9-0a37-4c1a-99b1-c7709fc64167", "It",
                 "It is a horror novel about seven children terrorized by an evil entity."),
                ("60188a2b-2784-4fc4-8df8-8919ff838b0b", "The Stand",
                 "The Stand is a post-apocalyptic dark fantasy novel."),
            ],
        ),
        _author(
            "76053df4-6687-4353-8937-b45556748abe", "George", "RR Martin", date(1948, 9, 20), "Fantasy",
            [
                ("447eb762-95e9-4c31-95e1-b20053fbe215", "A Game of Thrones",
                 "A Game of Thrones is the first novel in A Song of Ice and Fire."),
                ("bc4c35c3-3857-4250-9449-155fcf5109ec", "The Winds of Winter",
                 "Forthcoming sixth novel in A Song of Ice and Fire."),
                ("09af5a52-9421-44e8-a2bb-a6b9ccbc8239", "A Dance with Dragons",
                 "A Dance with Dragons is the fifth of seven planned novels in the series."),
            ],
        ),
        _author(
            "412c3012-d891-4f5e-9613-ff7aa63e6bb3", "Neil", "Gaiman", date(1960, 11, 10), "Fantasy",
            [
                ("9edf91ee-ab77-4521-a402-5f188bc0c577", "American Gods",
                 "American Gods is a Hugo and Nebula Award-winning novel."),
            ],
        ),
        _author(
            "578359b7-1967-41d6-8b87-64ab7605587e", "Tom", "Lanoye", date(1958, 8, 27), "Various",
            [
                ("01457142-358f-495f-aafa-fb23de3d67e9", "Speechless",
                 "Good-natured and often humorous, Speechless is a portrait of the author's mother."),
            ],
        ),
        _author(
            "f74d6899-9ed2-4137-9876-66b070553f8f", "Douglas", "Adams", date(1952, 3, 11), "Science fiction",
            [
                ("e57b605f-8b3c-4089-b672-6ce9e6d6c23f", "The Hitchhiker's Guide to the Galaxy",
                 "A comic science fiction series created by Douglas Adams."),
            ],
        ),
        _author(
            "a1da1d8e-1988-4634-b538-a01709477b77", "Jens", "Lapidus", date(1974, 5, 24), "Thriller",
            [
                ("1325360c-8253-473a-a20f-55c269c20407", "Easy Money",
                 "Easy Money or Snabba cash is a novel from 2006 by Jens Lapidus."),
            ],
        ),
    ]
