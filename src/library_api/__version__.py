"""Version information for library-api."""

__version__ = "1.0.0"
