"""Sort mapping table for book representations."""

from ...sorting import SortMapping, SortMappingTable


def build_book_sort_table() -> SortMappingTable:
    """Sortable BookDto properties and their storage fields."""
    return SortMappingTable(
        [
            SortMapping.of("id", "id"),
            SortMapping.of("title", "title"),
            SortMapping.of("description", "description"),
        ],
        default_order="title",
    )
