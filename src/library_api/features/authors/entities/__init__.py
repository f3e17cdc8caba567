"""Author entities."""

from .author import Author

__all__ = ["Author"]
