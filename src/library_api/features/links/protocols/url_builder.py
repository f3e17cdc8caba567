"""URL building protocol used by the link composer."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class UrlBuilder(Protocol):
    """Builds absolute URLs from route names."""

    def url_for(
        self,
        route_name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Build the URL of a named route.

        Args:
            route_name: Name the route was registered under
            path_params: Values for the route's path placeholders
            query_params: Query string parameters to append

        Returns:
            Absolute URL
        """
        ...
