"""Link services."""

from .link_composer import (
    DELETE_REL,
    LINKS_KEY,
    PARTIALLY_UPDATE_REL,
    SELF_REL,
    UPDATE_REL,
    LinkComposer,
)

__all__ = [
    "LinkComposer",
    "SELF_REL",
    "UPDATE_REL",
    "PARTIALLY_UPDATE_REL",
    "DELETE_REL",
    "LINKS_KEY",
]
