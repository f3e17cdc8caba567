"""UrlBuilder backed by the current FastAPI request."""

from typing import Any, Mapping, Optional

from fastapi import Request


class RequestUrlBuilder:
    """Builds URLs through the router of the request being handled."""

    def __init__(self, request: Request):
        self._request = request

    def url_for(
        self,
        route_name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None
    ) -> str:
        url = self._request.url_for(
            route_name,
            **{key: str(value) for key, value in (path_params or {}).items()}
        )
        if query_params:
            url = url.include_query_params(**query_params)
        return str(url)
