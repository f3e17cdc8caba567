"""Offset pagination for the Library API.

This module provides:
- Page requests with server-side clamping of page number and size
- Page descriptors carrying total count, position and navigation links
- A page builder combining a count query with a slice query
"""

from .entities import (
    NEXT_PAGE_REL,
    PREVIOUS_PAGE_REL,
    PageDescriptor,
    PageRequest,
    SortField,
    SortOrder,
)
from .services import CountFn, PageBuilder, SliceFn

__all__ = [
    "PageRequest",
    "SortField",
    "SortOrder",
    "PageDescriptor",
    "PREVIOUS_PAGE_REL",
    "NEXT_PAGE_REL",
    "PageBuilder",
    "CountFn",
    "SliceFn",
]
