"""Projection of resource objects onto client-selected fields."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ....core.exceptions import UnknownProjectionFieldError
from ..entities import TypeDescriptor

logger = logging.getLogger(__name__)


def parse_field_spec(fields: Optional[str]) -> List[str]:
    """Split a field selection into stripped, non-empty names."""
    if not fields:
        return []
    return [name.strip() for name in fields.split(",") if name.strip()]


class FieldProjector:
    """Reduces resource objects to the fields a client asked for.

    Output keys follow the declared field order of the resource shape,
    never the order of the request.
    """

    @staticmethod
    def unknown_fields(shape_type: type, fields: Optional[str]) -> List[str]:
        """Names in the field selection that the shape does not declare."""
        descriptor = TypeDescriptor.of(shape_type)
        return [name for name in parse_field_spec(fields) if not descriptor.has_field(name)]

    @classmethod
    def has_properties(cls, shape_type: type, fields: Optional[str]) -> bool:
        """Check that every selected field exists on the shape.

        An empty or whitespace-only selection is always valid.
        """
        return not cls.unknown_fields(shape_type, fields)

    @classmethod
    def ensure_properties(cls, shape_type: type, fields: Optional[str]) -> None:
        """Raise if the field selection names a field the shape does not declare.

        Raises:
            UnknownProjectionFieldError: With every unknown name
        """
        cls._selected_names(TypeDescriptor.of(shape_type), fields, ())

    @classmethod
    def _selected_names(
        cls,
        descriptor: TypeDescriptor,
        fields: Optional[str],
        identity_fields: Sequence[str]
    ) -> Optional[set]:
        requested = parse_field_spec(fields)
        if not requested:
            return None

        unknown = [name for name in requested if not descriptor.has_field(name)]
        if unknown:
            logger.warning(
                f"Rejected field selection '{fields}' for "
                f"{descriptor.shape_type.__name__}: unknown field(s) {unknown}"
            )
            raise UnknownProjectionFieldError(unknown, fields=fields)

        return {name.lower() for name in list(requested) + list(identity_fields)}

    @staticmethod
    def _project(obj: Any, descriptor: TypeDescriptor, selected: Optional[set]) -> Dict[str, Any]:
        return {
            field.name: field.accessor(obj)
            for field in descriptor.fields
            if selected is None or field.name.lower() in selected
        }

    @classmethod
    def shape(
        cls,
        obj: Any,
        fields: Optional[str] = None,
        declared_type: Optional[type] = None,
        identity_fields: Sequence[str] = ()
    ) -> Dict[str, Any]:
        """Copy the selected fields of one object into an ordered mapping.

        Args:
            obj: Resource object (pydantic model or dataclass instance)
            fields: Comma separated field names; empty selects every field
            declared_type: Shape whose declared fields are used, defaults to
                ``type(obj)``
            identity_fields: Fields always included (needed to build links)

        Returns:
            Mapping of field name to value in declared field order

        Raises:
            UnknownProjectionFieldError: If a selected field is not declared
        """
        descriptor = TypeDescriptor.of(declared_type or type(obj))
        selected = cls._selected_names(descriptor, fields, identity_fields)
        return cls._project(obj, descriptor, selected)

    @classmethod
    def shape_many(
        cls,
        objs: Iterable[Any],
        fields: Optional[str] = None,
        declared_type: Optional[type] = None,
        identity_fields: Sequence[str] = ()
    ) -> List[Dict[str, Any]]:
        """Shape every object, keeping input order."""
        objs = list(objs)
        if declared_type is None:
            if not objs:
                return []
            declared_type = type(objs[0])

        descriptor = TypeDescriptor.of(declared_type)
        selected = cls._selected_names(descriptor, fields, identity_fields)
        return [cls._project(obj, descriptor, selected) for obj in objs]
