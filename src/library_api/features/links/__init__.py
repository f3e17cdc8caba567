"""Hypermedia links for resources and collections."""

from .adapters import RequestUrlBuilder
from .entities import Link, LinkMethod, RelatedRoute, ResourceQueryState, RouteTemplateSet
from .protocols import UrlBuilder
from .services import (
    DELETE_REL,
    LINKS_KEY,
    PARTIALLY_UPDATE_REL,
    SELF_REL,
    UPDATE_REL,
    LinkComposer,
)

__all__ = [
    "Link",
    "LinkMethod",
    "RelatedRoute",
    "ResourceQueryState",
    "RouteTemplateSet",
    "UrlBuilder",
    "RequestUrlBuilder",
    "LinkComposer",
    "SELF_REL",
    "UPDATE_REL",
    "PARTIALLY_UPDATE_REL",
    "DELETE_REL",
    "LINKS_KEY",
]
