"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .domain import (
    BusinessRuleViolationError,
    ConfigurationError,
    InvalidIdentifierListError,
    InvalidRequestError,
    ResourceConflictError,
    ResourceNotFoundError,
    SortMappingNotFoundError,
    UnknownProjectionFieldError,
    UnknownSortFieldError,
)
from .base import LibraryError


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    InvalidRequestError: 400,
    UnknownSortFieldError: 400,
    UnknownProjectionFieldError: 400,
    InvalidIdentifierListError: 400,

    # 404 Not Found
    ResourceNotFoundError: 404,

    # 409 Conflict
    ResourceConflictError: 409,

    # 422 Unprocessable Entity
    BusinessRuleViolationError: 422,

    # 500 Internal Server Error
    ConfigurationError: 500,
    SortMappingNotFoundError: 500,

    # Default for LibraryError
    LibraryError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception, walking its class hierarchy.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 when nothing in the MRO is mapped)
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
