"""Book request models."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookForManipulationDto(BaseModel):
    """Fields shared by book create and update payloads."""

    title: str = Field(..., min_length=1, max_length=100, description="Book title")
    description: Optional[str] = Field(None, max_length=500, description="Book description")


class BookForCreationDto(BookForManipulationDto):
    """Payload for creating a book."""
    pass


class BookForUpdateDto(BookForManipulationDto):
    """Payload for fully updating (or upserting) a book."""

    description: str = Field(..., max_length=500, description="Book description")


class JsonPatchOperation(BaseModel):
    """One RFC 6902 operation of a book patch document, e.g. ``replace /title``."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"] = Field(..., description="Operation")
    path: str = Field(..., description="JSON pointer to the target member")
    value: Any = Field(None, description="Value for add, replace and test")
    from_: Optional[str] = Field(None, alias="from", description="Source pointer for move and copy")

    def to_document(self) -> dict:
        """Operation as a plain JSON patch entry (only the members that were sent)."""
        return self.model_dump(by_alias=True, exclude_unset=True)
