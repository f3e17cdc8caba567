"""
API routes for author collections (bulk create and fetch by id list).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from ....common import created_response, get_library_repository, get_link_composer
from ....core.exceptions import ResourceNotFoundError
from ....repositories import LibraryRepository
from ....utils import format_id_list, parse_id_list
from ...authors.models import AuthorDto, AuthorForCreationDto
from ...authors.routers import link_author
from ...authors.services import to_author_dto, to_author_entity
from ...books.services import ensure_description_differs_from_title
from ...links import LinkComposer
from ...shaping import FieldProjector

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/authorcollections", tags=["Author Collections"])


@router.post(
    "",
    name="create_author_collection",
    status_code=status.HTTP_201_CREATED,
    summary="Create several authors",
    description="Create a collection of authors in one request"
)
async def create_author_collection(
    request: Request,
    authors_data: List[AuthorForCreationDto],
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
):
    """Create every author of the collection and point to the collection URI."""
    for author_data in authors_data:
        for book in author_data.books:
            ensure_description_differs_from_title(book)

    authors = [repository.add_author(to_author_entity(author_data)) for author_data in authors_data]

    content = [
        link_author(links, FieldProjector.shape(to_author_dto(author)))
        for author in authors
    ]
    location = None
    if authors:
        ids = format_id_list([author.id for author in authors])
        location = str(request.url_for("get_author_collection", ids=ids))
    logger.info(f"Created author collection of {len(authors)} author(s)")
    return created_response(content, location)


@router.get(
    "/{ids}",
    name="get_author_collection",
    summary="Get several authors",
    description="Get the authors whose ids are listed, e.g. /authorcollections/id1,id2 or /authorcollections/(id1,id2)"
)
async def get_author_collection(
    ids: str,
    fields: Optional[str] = Query(None, description="Comma separated fields to return"),
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
) -> List[Dict[str, Any]]:
    """
    Get a collection of authors by id.

    Returns 404 when any requested author is missing.
    """
    author_ids = parse_id_list(ids)
    FieldProjector.ensure_properties(AuthorDto, fields)

    authors = repository.get_authors(author_ids)
    if len(authors) < len(author_ids):
        found = {author.id for author in authors}
        missing = [str(author_id) for author_id in author_ids if author_id not in found]
        raise ResourceNotFoundError(
            "Author",
            message=f"Authors not found: {', '.join(missing)}",
        )

    shaped = FieldProjector.shape_many(
        [to_author_dto(author) for author in authors],
        fields,
        declared_type=AuthorDto,
        identity_fields=("id",),
    )
    return [link_author(links, author, fields) for author in shaped]
