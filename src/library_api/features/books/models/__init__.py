"""Book request and response models."""

from .requests import (
    BookForCreationDto,
    BookForManipulationDto,
    BookForUpdateDto,
    JsonPatchOperation,
)
from .responses import BookDto

__all__ = [
    "BookForManipulationDto",
    "BookForCreationDto",
    "BookForUpdateDto",
    "JsonPatchOperation",
    "BookDto",
]
