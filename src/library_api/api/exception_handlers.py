"""
Application exception handlers.

Maps the Library API exception hierarchy onto HTTP responses so routers
can raise domain errors directly.
"""
import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import LibraryError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)

ResponseFormatter = Callable[[LibraryError], Dict[str, Any]]


class ExceptionHandlerRegistry:
    """Registry for the application's exception handlers."""

    def __init__(
        self,
        response_formatter: Optional[ResponseFormatter] = None,
        is_production: bool = True
    ):
        """
        Initialize exception handler registry.

        Args:
            response_formatter: Function to format error responses
            is_production: Whether running in production mode
        """
        self.response_formatter = response_formatter or create_error_response
        self.is_production = is_production

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(LibraryError)
        async def library_exception_handler(request: Request, exc: LibraryError):
            """Handle Library API exceptions."""
            status_code = get_http_status_code(exc)
            if status_code >= 500:
                logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
            else:
                logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
            return JSONResponse(
                status_code=status_code,
                content=self.response_formatter(exc)
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.is_production:
                message = "An unexpected error occurred"
            else:
                message = str(exc)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": {
                        "code": "InternalServerError",
                        "message": message,
                        "details": {},
                        "type": exc.__class__.__name__,
                    }
                }
            )


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[ResponseFormatter] = None,
    is_production: bool = True
) -> None:
    """
    Register exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        response_formatter: Custom response formatter function
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production)
    registry.register_handlers(app)
