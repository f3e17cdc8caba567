"""
Response helpers shared by the resource routers.
"""
import json
from typing import Any, Dict, List, Optional

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..features.links import LINKS_KEY, SELF_REL
from ..features.pagination import PageDescriptor

PAGINATION_HEADER = "X-Pagination"
VALUE_KEY = "value"


def self_href(resource: Dict[str, Any]) -> Optional[str]:
    """Href of the ``self`` link of a linked resource, if any."""
    for link in resource.get(LINKS_KEY, []):
        if link["rel"] == SELF_REL:
            return link["href"]
    return None


def collection_response(
    response: Response,
    page: PageDescriptor,
    value: List[Dict[str, Any]]
) -> Dict[str, Any]:
    """Body of a paged collection, with metadata in the ``X-Pagination`` header."""
    response.headers[PAGINATION_HEADER] = json.dumps(page.pagination_metadata())
    return {
        VALUE_KEY: value,
        LINKS_KEY: [link.model_dump(mode="json") for link in page.links],
    }


def created_response(content: Any, location: Optional[str]) -> JSONResponse:
    """201 response carrying the created resource and its location."""
    headers = {"Location": location} if location else None
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=jsonable_encoder(content),
        headers=headers,
    )


def no_content_response() -> Response:
    """Empty 204 response."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
