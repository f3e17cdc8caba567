"""Route templates registered for a resource kind."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .link import LinkMethod


@dataclass(frozen=True)
class RelatedRoute:
    """Extra link emitted for a single resource, e.g. an author's books."""

    rel: str
    route_name: str
    method: LinkMethod = LinkMethod.GET


@dataclass(frozen=True)
class RouteTemplateSet:
    """Names of the routes a resource kind exposes.

    Read-only kinds leave the mutation routes unset and get no mutation links.
    """

    self_route: str
    update_route: Optional[str] = None
    partial_update_route: Optional[str] = None
    delete_route: Optional[str] = None
    collection_route: Optional[str] = None
    related: Tuple[RelatedRoute, ...] = ()

    @property
    def is_read_only(self) -> bool:
        """Check if no mutation route is registered."""
        return not (self.update_route or self.partial_update_route or self.delete_route)
