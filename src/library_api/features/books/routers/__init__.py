"""Book routers."""

from .v1 import BOOK_ROUTES, link_book, router

__all__ = ["router", "BOOK_ROUTES", "link_book"]
