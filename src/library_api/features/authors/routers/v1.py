"""
API routes for authors.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ....common import (
    EngineConfig,
    collection_response,
    created_response,
    get_engine_config,
    get_library_repository,
    get_link_composer,
    no_content_response,
    self_href,
)
from ....core.exceptions import ResourceConflictError, ResourceNotFoundError
from ....repositories import AuthorFilter, LibraryRepository
from ...books.services import ensure_description_differs_from_title
from ...links import LinkComposer, LinkMethod, RelatedRoute, ResourceQueryState, RouteTemplateSet
from ...pagination import PageBuilder
from ...shaping import FieldProjector
from ...sorting import SortMapper
from ..models import AuthorDto, AuthorForCreationDto
from ..services import to_author_dto, to_author_entity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/authors", tags=["Authors"])

AUTHOR_ROUTES = RouteTemplateSet(
    self_route="get_author",
    delete_route="delete_author",
    collection_route="get_authors",
    related=(
        RelatedRoute("create_book_for_author", "create_book_for_author", LinkMethod.POST),
        RelatedRoute("books", "get_books_for_author"),
    ),
)

IDENTITY_FIELDS = ("id",)


def link_author(
    links: LinkComposer,
    shaped: Dict[str, Any],
    fields: Optional[str] = None
) -> Dict[str, Any]:
    """Attach the author links to a shaped author."""
    return links.for_resource(shaped, AUTHOR_ROUTES, {"author_id": shaped["id"]}, fields)


@router.get(
    "",
    name="get_authors",
    summary="List authors",
    description="Get a page of authors with sorting, filtering, searching and field selection"
)
async def get_authors(
    response: Response,
    order_by: Optional[str] = Query(None, alias="orderBy", description="Sort clause, e.g. 'genre desc, name'"),
    fields: Optional[str] = Query(None, description="Comma separated fields to return"),
    page_number: int = Query(1, alias="pageNumber", description="Page number"),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Items per page"),
    search_query: Optional[str] = Query(None, alias="searchQuery", description="Search in genre and name"),
    genre: Optional[str] = Query(None, description="Filter by genre"),
    engine: EngineConfig = Depends(get_engine_config),
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
) -> Dict[str, Any]:
    """
    List authors.

    Sorting and field selection are validated before the store is queried;
    pagination metadata is returned in the ``X-Pagination`` header.
    """
    sort_fields = SortMapper.resolve(engine.sort_registry, AuthorDto, order_by)
    FieldProjector.ensure_properties(AuthorDto, fields)

    author_filter = AuthorFilter(genre=genre, search_query=search_query)
    page = PageBuilder.build(
        lambda: repository.count_authors(author_filter),
        lambda offset, limit: repository.list_authors(author_filter, sort_fields, offset, limit),
        page_number,
        page_size if page_size is not None else engine.default_page_size,
        engine.max_page_size,
    )

    shaped = FieldProjector.shape_many(
        [to_author_dto(author) for author in page.items],
        fields,
        declared_type=AuthorDto,
        identity_fields=IDENTITY_FIELDS,
    )
    value = [link_author(links, author, fields) for author in shaped]

    query_state = ResourceQueryState(
        page_number=page_number,
        page_size=page.page_size,
        order_by=order_by,
        fields=fields,
        search_query=search_query,
        filters={"genre": genre},
    )
    page = links.for_collection(page, AUTHOR_ROUTES, query_state)
    return collection_response(response, page, value)


@router.options(
    "",
    name="get_authors_options",
    summary="Author collection options"
)
async def get_authors_options() -> Response:
    """Advertise the methods the author collection supports."""
    return Response(headers={"Allow": "GET,OPTIONS,POST"})


@router.get(
    "/{author_id}",
    name="get_author",
    summary="Get author"
)
async def get_author(
    author_id: UUID,
    fields: Optional[str] = Query(None, description="Comma separated fields to return"),
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
) -> Dict[str, Any]:
    """Get one author, optionally reduced to the selected fields."""
    FieldProjector.ensure_properties(AuthorDto, fields)

    author = repository.get_author(author_id)
    if author is None:
        raise ResourceNotFoundError("Author", author_id)

    shaped = FieldProjector.shape(to_author_dto(author), fields, identity_fields=IDENTITY_FIELDS)
    return link_author(links, shaped, fields)


@router.post(
    "",
    name="create_author",
    status_code=status.HTTP_201_CREATED,
    summary="Create author",
    description="Create an author, optionally together with books"
)
async def create_author(
    author_data: AuthorForCreationDto,
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
):
    """Create an author and return it with its links."""
    for book in author_data.books:
        ensure_description_differs_from_title(book)

    author = repository.add_author(to_author_entity(author_data))

    linked = link_author(links, FieldProjector.shape(to_author_dto(author)))
    return created_response(linked, self_href(linked))


@router.post(
    "/{author_id}",
    name="block_author_creation",
    summary="Reject creation at an explicit id",
    description="Authors are created on the collection; posting to an id is a conflict or not found"
)
async def block_author_creation(
    author_id: UUID,
    repository: LibraryRepository = Depends(get_library_repository),
):
    """Reject a POST to an author URI."""
    if repository.author_exists(author_id):
        raise ResourceConflictError("Author", author_id)
    raise ResourceNotFoundError("Author", author_id)


@router.delete(
    "/{author_id}",
    name="delete_author",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete author",
    description="Delete an author together with the author's books"
)
async def delete_author(
    author_id: UUID,
    repository: LibraryRepository = Depends(get_library_repository),
) -> Response:
    """Delete an author."""
    author = repository.get_author(author_id)
    if author is None:
        raise ResourceNotFoundError("Author", author_id)

    repository.delete_author(author)
    logger.info(f"Author {author_id} was deleted")
    return no_content_response()
