"""Pagination request entities and enums."""

from dataclasses import dataclass
from enum import Enum


class SortOrder(str, Enum):
    """Sort order enumeration."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_descending(cls, descending: bool) -> "SortOrder":
        """Build a sort order from a descending flag."""
        return cls.DESC if descending else cls.ASC


@dataclass(frozen=True)
class SortField:
    """Resolved storage ordering with validation."""

    field: str
    order: SortOrder = SortOrder.ASC
    nulls_last: bool = True

    def __post_init__(self):
        """Validate field name so it is safe to hand to a query layer."""
        if not self.field or not self.field.replace("_", "").replace(".", "").isalnum():
            raise ValueError(f"Invalid field name: {self.field}")

    @property
    def descending(self) -> bool:
        """Check if this ordering is descending."""
        return self.order == SortOrder.DESC


@dataclass(frozen=True)
class PageRequest:
    """Offset-based page request (page number / page size).

    Built through ``clamped`` so handlers never see an out-of-range size or
    a page number below one.
    """

    page_number: int = 1
    page_size: int = 10

    def __post_init__(self):
        """Validate pagination parameters."""
        if self.page_number < 1:
            raise ValueError("Page number must be >= 1")
        if self.page_size < 1:
            raise ValueError("Page size must be >= 1")

    @classmethod
    def clamped(cls, page_number: int, page_size: int, max_page_size: int) -> "PageRequest":
        """Clamp page size to [1, max_page_size] and page number to >= 1."""
        if max_page_size < 1:
            raise ValueError("Max page size must be >= 1")
        return cls(
            page_number=max(page_number, 1),
            page_size=min(max(page_size, 1), max_page_size),
        )

    @property
    def offset(self) -> int:
        """Calculate offset from page number and page size."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size
