"""Query state of a collection request, used to build navigation links."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ResourceQueryState:
    """Filters, sort, field selection and paging of a collection request."""

    page_number: int = 1
    page_size: int = 10
    order_by: Optional[str] = None
    fields: Optional[str] = None
    search_query: Optional[str] = None
    filters: Dict[str, Any] = field(default_factory=dict)

    def with_page(self, page_number: int, page_size: Optional[int] = None) -> "ResourceQueryState":
        """Copy with another page number (and optionally page size)."""
        return replace(
            self,
            page_number=page_number,
            page_size=self.page_size if page_size is None else page_size,
        )

    def to_query_params(self) -> Dict[str, Any]:
        """Query string parameters, skipping unset values."""
        params: Dict[str, Any] = {}
        if self.fields:
            params["fields"] = self.fields
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.search_query:
            params["searchQuery"] = self.search_query
        for key, value in self.filters.items():
            if value is not None:
                params[key] = value
        params["pageNumber"] = self.page_number
        params["pageSize"] = self.page_size
        return params
