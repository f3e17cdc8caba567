"""Author request and response models."""

from .requests import AuthorForCreationDto
from .responses import AuthorDto

__all__ = ["AuthorForCreationDto", "AuthorDto"]
