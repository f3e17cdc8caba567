"""Client sort clause resolution.

Maps client-facing sortable properties onto storage fields, including
composite keys and properties whose direction is inverted in storage.
"""

from .entities import SortMapping, SortMappingRegistry, SortMappingTable, SortTarget
from .services import SortMapper, parse_order_clause

__all__ = [
    "SortTarget",
    "SortMapping",
    "SortMappingTable",
    "SortMappingRegistry",
    "SortMapper",
    "parse_order_clause",
]
