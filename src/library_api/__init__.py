"""Library API.

A library catalogue REST service whose responses are sorted, paged,
shaped to client-selected fields and decorated with hypermedia links.
"""

from .__version__ import __version__

__all__ = ["__version__"]
