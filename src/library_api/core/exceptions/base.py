"""Root of the Library API exception hierarchy.

Status codes live in ``http_mapping``; this module only knows how an error
is rendered into a response body.
"""

from typing import Any, Dict, Optional


class LibraryError(Exception):
    """Error the API reports to clients as ``{"error": {...}}``.

    ``error_code`` defaults to the class name so handlers and clients can
    branch on it without parsing messages.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details or {})


def create_error_response(exception: LibraryError) -> Dict[str, Any]:
    """Error envelope with code, message, details and exception type."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": type(exception).__name__,
        }
    }
