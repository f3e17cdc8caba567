"""Business rules for book payloads."""

import logging
from typing import Any, Dict, Optional, Sequence

import jsonpatch
from pydantic import ValidationError

from ....core.exceptions import BusinessRuleViolationError
from ..models import BookForManipulationDto, JsonPatchOperation

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = ("title", "description")


def ensure_description_differs_from_title(book: BookForManipulationDto) -> None:
    """Reject a payload whose description repeats its title."""
    if book.description is not None and book.description == book.title:
        raise BusinessRuleViolationError(
            "The provided description should be different from the title.",
            field="description",
        )


def apply_book_patch(
    operations: Sequence[JsonPatchOperation],
    base: Optional[Dict[str, Any]] = None
) -> BookForManipulationDto:
    """Apply a JSON patch document to a book and validate the result.

    Without a base (upsert of a missing book) the operations apply to a
    document whose members are all null, so ``replace`` works on it.

    Raises:
        BusinessRuleViolationError: If the patch cannot be applied or the
            patched book is invalid
    """
    document = dict(base) if base is not None else dict.fromkeys(PATCHABLE_FIELDS)
    try:
        patch = jsonpatch.JsonPatch([operation.to_document() for operation in operations])
        patched = patch.apply(document)
    except (jsonpatch.JsonPatchException, jsonpatch.JsonPointerException) as e:
        logger.info(f"Rejected book patch: {e}")
        raise BusinessRuleViolationError(f"Patch document could not be applied: {e}")

    try:
        book = BookForManipulationDto.model_validate(patched)
    except ValidationError as e:
        raise BusinessRuleViolationError(
            f"Patched book is invalid: {e.errors(include_url=False)}"
        )
    ensure_description_differs_from_title(book)
    return book
