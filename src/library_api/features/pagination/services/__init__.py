"""Pagination services."""

from .page_builder import CountFn, PageBuilder, SliceFn

__all__ = ["PageBuilder", "CountFn", "SliceFn"]
