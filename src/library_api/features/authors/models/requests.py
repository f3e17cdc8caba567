"""Author request models."""

from datetime import date
from typing import List

from pydantic import BaseModel, Field

from ...books.models import BookForCreationDto


class AuthorForCreationDto(BaseModel):
    """Payload for creating an author, optionally with books."""

    first_name: str = Field(..., min_length=1, max_length=50, description="First name")
    last_name: str = Field(..., min_length=1, max_length=50, description="Last name")
    date_of_birth: date = Field(..., description="Date of birth")
    genre: str = Field(..., min_length=1, max_length=50, description="Main genre")
    books: List[BookForCreationDto] = Field(default_factory=list, description="Books to create with the author")
