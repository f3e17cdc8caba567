"""Domain-specific exceptions for the Library API.

This module defines exceptions that relate to request validation,
resource lookup and business rules.
"""

from typing import Any, Iterable, Optional

from .base import LibraryError


# Configuration Errors
class ConfigurationError(LibraryError):
    """Raised when there's a configuration issue."""
    pass


class SortMappingNotFoundError(ConfigurationError):
    """Raised when no sort mapping table is registered for a resource shape."""

    def __init__(self, dto_type: Any):
        name = getattr(dto_type, "__name__", str(dto_type))
        super().__init__(
            f"No sort mapping registered for {name}",
            details={"dto_type": name},
        )


# Request Errors
class InvalidRequestError(LibraryError):
    """Raised when client input cannot be honoured."""
    pass


class UnknownSortFieldError(InvalidRequestError):
    """Raised when a sort clause names a property without a mapping entry."""

    def __init__(self, unknown_fields: Iterable[str], order_by: Optional[str] = None):
        self.unknown_fields = list(unknown_fields)
        super().__init__(
            f"Cannot sort by unknown field(s): {', '.join(self.unknown_fields)}",
            details={"unknown_fields": self.unknown_fields, "order_by": order_by},
        )


class UnknownProjectionFieldError(InvalidRequestError):
    """Raised when a field selection names a property the resource does not have."""

    def __init__(self, unknown_fields: Iterable[str], fields: Optional[str] = None):
        self.unknown_fields = list(unknown_fields)
        super().__init__(
            f"Cannot select unknown field(s): {', '.join(self.unknown_fields)}",
            details={"unknown_fields": self.unknown_fields, "fields": fields},
        )


class InvalidIdentifierListError(InvalidRequestError):
    """Raised when an id list path segment cannot be parsed."""
    pass


# Resource Errors
class ResourceNotFoundError(LibraryError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, resource_id: Any = None, message: Optional[str] = None):
        details = {"resource": resource}
        if resource_id is not None:
            details["id"] = str(resource_id)
        super().__init__(
            message or f"{resource} {resource_id} not found",
            details=details,
        )


class ResourceConflictError(LibraryError):
    """Raised when a resource already exists at the target location."""

    def __init__(self, resource: str, resource_id: Any = None):
        details = {"resource": resource}
        if resource_id is not None:
            details["id"] = str(resource_id)
        super().__init__(f"{resource} {resource_id} already exists", details=details)


class BusinessRuleViolationError(LibraryError):
    """Raised when a payload violates a business rule."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, details=details)
