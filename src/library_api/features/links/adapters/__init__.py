"""Link adapters."""

from .request_url_builder import RequestUrlBuilder

__all__ = ["RequestUrlBuilder"]
