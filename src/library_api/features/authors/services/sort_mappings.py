"""Sort mapping table for author representations."""

from ...sorting import SortMapping, SortMappingTable, SortTarget


def build_author_sort_table() -> SortMappingTable:
    """Sortable AuthorDto properties and their storage fields.

    ``age`` sorts through ``date_of_birth`` with the direction reverted:
    the youngest author has the latest birth date.
    """
    return SortMappingTable(
        [
            SortMapping.of("id", "id"),
            SortMapping.of("genre", "genre"),
            SortMapping.of("age", SortTarget("date_of_birth", revert=True)),
            SortMapping.of("name", "first_name", "last_name"),
        ],
        default_order="name",
    )
