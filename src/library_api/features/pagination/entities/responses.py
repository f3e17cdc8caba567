"""Page descriptor returned by the page builder."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Tuple, TypeVar

if TYPE_CHECKING:
    from ...links.entities.link import Link

T = TypeVar('T')

PREVIOUS_PAGE_REL = "previous-page"
NEXT_PAGE_REL = "next-page"


@dataclass(frozen=True)
class PageDescriptor(Generic[T]):
    """One page of a result set plus its position in the whole set.

    ``total_count`` comes from a separate count query, so it is only
    best-effort consistent with ``items`` when rows change between the two
    queries.
    """

    items: List[T]
    total_count: int
    page_size: int
    current_page: int
    links: Tuple["Link", ...] = field(default_factory=tuple)

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages (0 for an empty result set)."""
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.current_page < max(self.total_pages, 1)

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.current_page > 1

    @property
    def offset(self) -> int:
        """Get current offset."""
        return (self.current_page - 1) * self.page_size

    @property
    def count(self) -> int:
        """Get number of items in current page."""
        return len(self.items)

    def link_href(self, rel: str) -> Optional[str]:
        """Get the href of the first attached link with the given rel."""
        for link in self.links:
            if link.rel == rel:
                return link.href
        return None

    def pagination_metadata(self) -> Dict[str, Any]:
        """Out-of-band pagination metadata (sent as the X-Pagination header)."""
        return {
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "previousPageLink": self.link_href(PREVIOUS_PAGE_REL),
            "nextPageLink": self.link_href(NEXT_PAGE_REL),
        }
