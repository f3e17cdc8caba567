"""Static field descriptor tables for resource shapes."""

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared field of a resource shape and how to read it."""

    name: str
    accessor: Callable[[Any], Any]


class TypeDescriptor:
    """Ordered, case-insensitive table of the fields a type declares.

    Fields come from pydantic ``model_fields`` or dataclass ``fields()`` in
    declaration order. Attributes a runtime subclass adds are not part of the
    descriptor of the declared type.
    """

    def __init__(self, shape_type: type, fields: Tuple[FieldDescriptor, ...]):
        self.shape_type = shape_type
        self.fields = fields
        self._by_name: Mapping[str, FieldDescriptor] = MappingProxyType(
            {descriptor.name.lower(): descriptor for descriptor in fields}
        )

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Declared field names in declaration order."""
        return tuple(descriptor.name for descriptor in self.fields)

    def has_field(self, name: str) -> bool:
        """Case-insensitive field lookup."""
        return name.strip().lower() in self._by_name

    def get(self, name: str) -> Optional[FieldDescriptor]:
        """Get a field descriptor by case-insensitive name."""
        return self._by_name.get(name.strip().lower())

    @classmethod
    def of(cls, shape_type: type) -> "TypeDescriptor":
        """Get the (cached) descriptor of a pydantic model or dataclass type."""
        return _describe(shape_type)

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.shape_type.__name__}, fields={list(self.field_names)})"


def _declared_field_names(shape_type: type) -> Tuple[str, ...]:
    if isinstance(shape_type, type) and issubclass(shape_type, BaseModel):
        return tuple(shape_type.model_fields.keys())
    if dataclasses.is_dataclass(shape_type):
        return tuple(field.name for field in dataclasses.fields(shape_type))
    raise TypeError(
        f"Cannot describe {getattr(shape_type, '__name__', shape_type)!r}: "
        f"expected a pydantic model or dataclass type"
    )


@lru_cache(maxsize=None)
def _describe(shape_type: type) -> TypeDescriptor:
    fields = tuple(
        FieldDescriptor(name=name, accessor=attrgetter(name))
        for name in _declared_field_names(shape_type)
    )
    return TypeDescriptor(shape_type, fields)
