"""Library API features."""
