"""Resolution of client order clauses into storage orderings."""

import logging
from typing import Any, List, Optional, Tuple

from ....core.exceptions import SortMappingNotFoundError, UnknownSortFieldError
from ...pagination.entities import SortField, SortOrder
from ..entities import SortMappingRegistry, SortMappingTable

logger = logging.getLogger(__name__)

DESCENDING_SUFFIX = "desc"


def parse_order_clause(order_by: Optional[str]) -> List[Tuple[str, bool]]:
    """Split an order clause into (property name, descending) pairs.

    ``"name, age desc"`` becomes ``[("name", False), ("age", True)]``.
    Empty tokens are skipped.
    """
    if not order_by:
        return []

    clauses = []
    for token in order_by.split(","):
        words = token.split()
        if not words:
            continue
        descending = len(words) > 1 and words[-1].lower() == DESCENDING_SUFFIX
        clauses.append((words[0], descending))
    return clauses


class SortMapper:
    """Resolves order clauses against sort mapping tables.

    Resolution is atomic: one unknown property rejects the whole clause.
    """

    @staticmethod
    def _table_for(registry: SortMappingRegistry, dto_type: Any) -> SortMappingTable:
        table = registry.get(dto_type)
        if table is None:
            raise SortMappingNotFoundError(dto_type)
        return table

    @classmethod
    def is_valid(cls, registry: SortMappingRegistry, dto_type: Any, order_by: Optional[str]) -> bool:
        """Check that every property in the clause has a mapping entry."""
        table = cls._table_for(registry, dto_type)
        return all(name in table for name, _ in parse_order_clause(order_by))

    @classmethod
    def resolve(
        cls,
        registry: SortMappingRegistry,
        dto_type: Any,
        order_by: Optional[str]
    ) -> List[SortField]:
        """Resolve an order clause into storage orderings.

        Args:
            registry: Sort mapping tables built at startup
            dto_type: Resource shape the clause refers to
            order_by: Client clause, e.g. ``"genre,age desc"``; empty means
                the table's default order

        Returns:
            Storage orderings in application order

        Raises:
            UnknownSortFieldError: If any property has no mapping entry
            SortMappingNotFoundError: If no table is registered for dto_type
        """
        table = cls._table_for(registry, dto_type)

        clauses = parse_order_clause(order_by)
        if not clauses:
            clauses = parse_order_clause(table.default_order)

        unknown = [name for name, _ in clauses if name not in table]
        if unknown:
            logger.warning(f"Rejected order clause '{order_by}': unknown field(s) {unknown}")
            raise UnknownSortFieldError(unknown, order_by=order_by)

        sort_fields = []
        for name, descending in clauses:
            for target in table[name].targets:
                sort_fields.append(
                    SortField(target.field, SortOrder.from_descending(descending != target.revert))
                )
        return sort_fields
