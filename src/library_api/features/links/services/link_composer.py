"""Attaches hypermedia links to resources and page descriptors."""

import dataclasses
from typing import Any, Dict, List, Mapping, Optional

from ...pagination.entities import NEXT_PAGE_REL, PREVIOUS_PAGE_REL, PageDescriptor
from ..entities import Link, LinkMethod, ResourceQueryState, RouteTemplateSet
from ..protocols import UrlBuilder

SELF_REL = "self"
UPDATE_REL = "update"
PARTIALLY_UPDATE_REL = "partially_update"
DELETE_REL = "delete"
LINKS_KEY = "links"


class LinkComposer:
    """Composes links through an external URL builder.

    Inputs are never mutated: resources and page descriptors come back as
    new objects carrying their own link list.
    """

    def __init__(self, url_builder: UrlBuilder):
        self._url_builder = url_builder

    def _link(
        self,
        rel: str,
        route_name: str,
        method: LinkMethod,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None
    ) -> Link:
        href = self._url_builder.url_for(route_name, path_params, query_params)
        return Link(href=href, rel=rel, method=method)

    def resource_links(
        self,
        templates: RouteTemplateSet,
        identity: Mapping[str, Any],
        fields: Optional[str] = None
    ) -> List[Link]:
        """Links for a single resource.

        ``self`` always; ``update``, ``partially_update`` and ``delete`` only
        when the matching route is registered; then any related routes.
        """
        query = {"fields": fields} if fields else None
        links = [self._link(SELF_REL, templates.self_route, LinkMethod.GET, identity, query)]

        if templates.update_route:
            links.append(self._link(UPDATE_REL, templates.update_route, LinkMethod.PUT, identity))
        if templates.partial_update_route:
            links.append(
                self._link(PARTIALLY_UPDATE_REL, templates.partial_update_route, LinkMethod.PATCH, identity)
            )
        if templates.delete_route:
            links.append(self._link(DELETE_REL, templates.delete_route, LinkMethod.DELETE, identity))

        for related in templates.related:
            links.append(self._link(related.rel, related.route_name, related.method, identity))

        return links

    def for_resource(
        self,
        resource: Mapping[str, Any],
        templates: RouteTemplateSet,
        identity: Mapping[str, Any],
        fields: Optional[str] = None
    ) -> Dict[str, Any]:
        """Copy of a shaped resource with its ``links`` list populated."""
        linked = {key: value for key, value in resource.items() if key != LINKS_KEY}
        linked[LINKS_KEY] = [
            link.model_dump(mode="json") for link in self.resource_links(templates, identity, fields)
        ]
        return linked

    def collection_links(
        self,
        page: PageDescriptor,
        templates: RouteTemplateSet,
        query_state: ResourceQueryState,
        path_params: Optional[Mapping[str, Any]] = None
    ) -> List[Link]:
        """Self, previous-page and next-page links for a page of a collection."""
        route_name = templates.collection_route or templates.self_route
        current = query_state.with_page(page.current_page, page.page_size)

        links = [
            self._link(SELF_REL, route_name, LinkMethod.GET, path_params, current.to_query_params())
        ]
        if page.has_previous:
            previous = current.with_page(page.current_page - 1)
            links.append(
                self._link(PREVIOUS_PAGE_REL, route_name, LinkMethod.GET, path_params, previous.to_query_params())
            )
        if page.has_next:
            following = current.with_page(page.current_page + 1)
            links.append(
                self._link(NEXT_PAGE_REL, route_name, LinkMethod.GET, path_params, following.to_query_params())
            )
        return links

    def for_collection(
        self,
        page: PageDescriptor,
        templates: RouteTemplateSet,
        query_state: ResourceQueryState,
        path_params: Optional[Mapping[str, Any]] = None
    ) -> PageDescriptor:
        """Copy of a page descriptor with its navigation links populated."""
        links = self.collection_links(page, templates, query_state, path_params)
        return dataclasses.replace(page, links=tuple(links))
