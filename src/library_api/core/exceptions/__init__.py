"""Exception hierarchy for the Library API."""

from .base import LibraryError, create_error_response
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
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "LibraryError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "ConfigurationError",
    "SortMappingNotFoundError",
    "InvalidRequestError",
    "UnknownSortFieldError",
    "UnknownProjectionFieldError",
    "InvalidIdentifierListError",
    "ResourceNotFoundError",
    "ResourceConflictError",
    "BusinessRuleViolationError",
]
