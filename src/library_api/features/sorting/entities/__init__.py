"""Sort mapping entities."""

from .sort_mapping import SortMapping, SortMappingRegistry, SortMappingTable, SortTarget

__all__ = [
    "SortTarget",
    "SortMapping",
    "SortMappingTable",
    "SortMappingRegistry",
]
