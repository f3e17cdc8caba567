"""
Identifier utilities.
"""
from typing import List
from uuid import UUID

from ..core.exceptions import InvalidIdentifierListError


def parse_id_list(raw: str) -> List[UUID]:
    """
    Parse a comma separated id list such as ``(id1,id2)``.

    Surrounding parentheses are optional; duplicates are dropped while
    keeping first-seen order.

    Raises:
        InvalidIdentifierListError: If the list is empty or an id is malformed
    """
    value = raw.strip()
    if value.startswith("(") and value.endswith(")"):
        value = value[1:-1]

    tokens = [token.strip() for token in value.split(",") if token.strip()]
    if not tokens:
        raise InvalidIdentifierListError("Id list cannot be empty", details={"ids": raw})

    ids: List[UUID] = []
    for token in tokens:
        try:
            identifier = UUID(token)
        except ValueError:
            raise InvalidIdentifierListError(
                f"Invalid id in list: {token}",
                details={"ids": raw, "invalid": token},
            )
        if identifier not in ids:
            ids.append(identifier)
    return ids


def format_id_list(ids: List[UUID]) -> str:
    """Join ids with commas, as read back by ``parse_id_list``."""
    return ",".join(str(identifier) for identifier in ids)
