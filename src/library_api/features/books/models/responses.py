"""Book response models."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BookDto(BaseModel):
    """Book representation returned by the API."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Book ID")
    title: str = Field(..., description="Book title")
    description: Optional[str] = Field(None, description="Book description")
    author_id: UUID = Field(..., description="Author ID")
