"""
API routes for the books of an author.
"""

import logging
from typing import Any, Dict, List, Optional
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
from ....core.exceptions import ResourceNotFoundError
from ....repositories import LibraryRepository
from ...links import LinkComposer, ResourceQueryState, RouteTemplateSet
from ...pagination import PageBuilder
from ...shaping import FieldProjector
from ...sorting import SortMapper
from ..entities import Book
from ..models import BookDto, BookForCreationDto, BookForUpdateDto, JsonPatchOperation
from ..services import (
    apply_book_patch,
    apply_book_update,
    ensure_description_differs_from_title,
    to_book_dto,
    to_book_entity,
    to_book_patch_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/authors/{author_id}/books", tags=["Books"])

BOOK_ROUTES = RouteTemplateSet(
    self_route="get_book_for_author",
    update_route="update_book_for_author",
    partial_update_route="partially_update_book_for_author",
    delete_route="delete_book_for_author",
    collection_route="get_books_for_author",
)

IDENTITY_FIELDS = ("id",)


def link_book(
    links: LinkComposer,
    author_id: UUID,
    shaped: Dict[str, Any],
    fields: Optional[str] = None
) -> Dict[str, Any]:
    """Attach the book links to a shaped book."""
    identity = {"author_id": author_id, "book_id": shaped["id"]}
    return links.for_resource(shaped, BOOK_ROUTES, identity, fields)


def _ensure_author(repository: LibraryRepository, author_id: UUID) -> None:
    if not repository.author_exists(author_id):
        raise ResourceNotFoundError("Author", author_id)


def _created_book(links: LinkComposer, author_id: UUID, book: Book):
    linked = link_book(links, author_id, FieldProjector.shape(to_book_dto(book)))
    return created_response(linked, self_href(linked))


@router.get(
    "",
    name="get_books_for_author",
    summary="List books of an author",
    description="Get a page of an author's books with sorting and field selection"
)
async def get_books_for_author(
    author_id: UUID,
    response: Response,
    order_by: Optional[str] = Query(None, alias="orderBy", description="Sort clause, e.g. 'title desc'"),
    fields: Optional[str] = Query(None, description="Comma separated fields to return"),
    page_number: int = Query(1, alias="pageNumber", description="Page number"),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Items per page"),
    engine: EngineConfig = Depends(get_engine_config),
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
) -> Dict[str, Any]:
    """List the books of an author."""
    sort_fields = SortMapper.resolve(engine.sort_registry, BookDto, order_by)
    FieldProjector.ensure_properties(BookDto, fields)
    _ensure_author(repository, author_id)

    page = PageBuilder.build(
        lambda: repository.count_books_for_author(author_id),
        lambda offset, limit: repository.list_books_for_author(author_id, sort_fields, offset, limit),
        page_number,
        page_size if page_size is not None else engine.default_page_size,
        engine.max_page_size,
    )

    shaped = FieldProjector.shape_many(
        [to_book_dto(book) for book in page.items],
        fields,
        declared_type=BookDto,
        identity_fields=IDENTITY_FIELDS,
    )
    value = [link_book(links, author_id, book, fields) for book in shaped]

    query_state = ResourceQueryState(
        page_number=page_number,
        page_size=page.page_size,
        order_by=order_by,
        fields=fields,
    )
    page = links.for_collection(page, BOOK_ROUTES, query_state, path_params={"author_id": author_id})
    return collection_response(response, page, value)


@router.get(
    "/{book_id}",
    name="get_book_for_author",
    summary="Get book of an author"
)
async def get_book_for_author(
    author_id: UUID,
    book_id: UUID,
    fields: Optional[str] = Query(None, description="Comma separated fields to return"),
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
) -> Dict[str, Any]:
    """Get one book of an author."""
    FieldProjector.ensure_properties(BookDto, fields)
    _ensure_author(repository, author_id)

    book = repository.get_book_for_author(author_id, book_id)
    if book is None:
        raise ResourceNotFoundError("Book", book_id)

    shaped = FieldProjector.shape(to_book_dto(book), fields, identity_fields=IDENTITY_FIELDS)
    return link_book(links, author_id, shaped, fields)


@router.post(
    "",
    name="create_book_for_author",
    status_code=status.HTTP_201_CREATED,
    summary="Create book for an author"
)
async def create_book_for_author(
    author_id: UUID,
    book_data: BookForCreationDto,
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
):
    """Create a book for an existing author."""
    _ensure_author(repository, author_id)
    ensure_description_differs_from_title(book_data)

    book = repository.add_book_for_author(author_id, to_book_entity(book_data))
    return _created_book(links, author_id, book)


@router.put(
    "/{book_id}",
    name="update_book_for_author",
    summary="Update or create book",
    description="Fully update a book; a missing book is created at the given id"
)
async def update_book_for_author(
    author_id: UUID,
    book_id: UUID,
    book_data: BookForUpdateDto,
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
):
    """Replace a book, or upsert it when it does not exist yet."""
    _ensure_author(repository, author_id)
    ensure_description_differs_from_title(book_data)

    book = repository.get_book_for_author(author_id, book_id)
    if book is None:
        book = repository.add_book_for_author(author_id, to_book_entity(book_data, book_id))
        logger.info(f"Book {book_id} for author {author_id} was created by upsert")
        return _created_book(links, author_id, book)

    repository.update_book_for_author(apply_book_update(book_data, book))
    return no_content_response()


@router.patch(
    "/{book_id}",
    name="partially_update_book_for_author",
    summary="Partially update or create book",
    description="Apply a JSON patch document to a book; a missing book is created from it"
)
async def partially_update_book_for_author(
    author_id: UUID,
    book_id: UUID,
    operations: List[JsonPatchOperation],
    repository: LibraryRepository = Depends(get_library_repository),
    links: LinkComposer = Depends(get_link_composer),
):
    """Patch a book, or upsert it when it does not exist yet."""
    _ensure_author(repository, author_id)

    book = repository.get_book_for_author(author_id, book_id)
    if book is None:
        book_data = apply_book_patch(operations)
        book = repository.add_book_for_author(author_id, to_book_entity(book_data, book_id))
        logger.info(f"Book {book_id} for author {author_id} was created by upsert")
        return _created_book(links, author_id, book)

    book_data = apply_book_patch(operations, to_book_patch_document(book))
    repository.update_book_for_author(apply_book_update(book_data, book))
    return no_content_response()


@router.delete(
    "/{book_id}",
    name="delete_book_for_author",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete book of an author"
)
async def delete_book_for_author(
    author_id: UUID,
    book_id: UUID,
    repository: LibraryRepository = Depends(get_library_repository),
) -> Response:
    """Delete a book of an author."""
    _ensure_author(repository, author_id)

    book = repository.get_book_for_author(author_id, book_id)
    if book is None:
        raise ResourceNotFoundError("Book", book_id)

    repository.delete_book(book)
    logger.info(f"Book {book_id} for author {author_id} was deleted")
    return no_content_response()
