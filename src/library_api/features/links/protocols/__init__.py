"""Link protocols."""

from .url_builder import UrlBuilder

__all__ = ["UrlBuilder"]
