"""Utility helpers for the Library API."""

from .dates import get_current_age, utc_today
from .identifiers import format_id_list, parse_id_list

__all__ = [
    "get_current_age",
    "utc_today",
    "parse_id_list",
    "format_id_list",
]
