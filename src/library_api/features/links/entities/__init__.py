"""Link entities."""

from .link import Link, LinkMethod
from .query_state import ResourceQueryState
from .route_templates import RelatedRoute, RouteTemplateSet

__all__ = [
    "Link",
    "LinkMethod",
    "ResourceQueryState",
    "RelatedRoute",
    "RouteTemplateSet",
]
