"""Shaping services."""

from .field_projector import FieldProjector, parse_field_spec

__all__ = ["FieldProjector", "parse_field_spec"]
