"""Pagination entities for requests and page descriptors."""

from .requests import PageRequest, SortField, SortOrder
from .responses import NEXT_PAGE_REL, PREVIOUS_PAGE_REL, PageDescriptor

__all__ = [
    "PageRequest",
    "SortField",
    "SortOrder",
    "PageDescriptor",
    "PREVIOUS_PAGE_REL",
    "NEXT_PAGE_REL",
]
