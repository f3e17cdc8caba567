"""Sorting services."""

from .sort_mapper import SortMapper, parse_order_clause

__all__ = ["SortMapper", "parse_order_clause"]
