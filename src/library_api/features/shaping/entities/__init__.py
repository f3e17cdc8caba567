"""Shaping entities."""

from .type_descriptor import FieldDescriptor, TypeDescriptor

__all__ = ["FieldDescriptor", "TypeDescriptor"]
