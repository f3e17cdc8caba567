"""Field selection (data shaping) for resource representations."""

from .entities import FieldDescriptor, TypeDescriptor
from .services import FieldProjector, parse_field_spec

__all__ = [
    "FieldDescriptor",
    "TypeDescriptor",
    "FieldProjector",
    "parse_field_spec",
]
