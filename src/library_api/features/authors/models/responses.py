"""Author response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AuthorDto(BaseModel):
    """Author representation returned by the API."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Author ID")
    name: str = Field(..., description="Full name")
    age: int = Field(..., description="Age in years")
    genre: str = Field(..., description="Main genre")
