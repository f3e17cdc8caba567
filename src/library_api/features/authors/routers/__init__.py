"""Author routers."""

from .v1 import AUTHOR_ROUTES, link_author, router

__all__ = ["router", "AUTHOR_ROUTES", "link_author"]
