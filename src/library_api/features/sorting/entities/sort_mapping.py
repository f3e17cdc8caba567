"""Sort mapping entities.

A sort mapping translates a client-visible property of a resource shape into
one or more storage ordering keys. Tables are built once at startup and are
read-only afterwards.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SortTarget:
    """A storage field a client property sorts by.

    ``revert`` marks a storage field whose natural order is the opposite of
    the client property, e.g. ``age`` sorted through ``date_of_birth``.
    """

    field: str
    revert: bool = False


@dataclass(frozen=True)
class SortMapping:
    """Client property name mapped to its ordered storage targets."""

    property_name: str
    targets: Tuple[SortTarget, ...]

    def __post_init__(self):
        if not self.property_name or not self.property_name.strip():
            raise ValueError("Sort mapping property name cannot be empty")
        if not self.targets:
            raise ValueError(f"Sort mapping '{self.property_name}' needs at least one target")

    @classmethod
    def of(cls, property_name: str, *targets: Any) -> "SortMapping":
        """Build a mapping from targets given as names, (name, revert) pairs or SortTargets."""
        built = []
        for target in targets:
            if isinstance(target, SortTarget):
                built.append(target)
            elif isinstance(target, str):
                built.append(SortTarget(target))
            else:
                field, revert = target
                built.append(SortTarget(field, revert))
        return cls(property_name, tuple(built))


class SortMappingTable(Mapping[str, SortMapping]):
    """Immutable, case-insensitive table of sort mappings for one resource shape."""

    def __init__(self, mappings: Iterable[SortMapping], default_order: str):
        table: Dict[str, SortMapping] = {}
        for mapping in mappings:
            key = mapping.property_name.strip().lower()
            if key in table:
                raise ValueError(f"Duplicate sort mapping for '{mapping.property_name}'")
            table[key] = mapping
        self._mappings = MappingProxyType(table)
        self._default_order = default_order

    @property
    def default_order(self) -> str:
        """Order clause used when the client does not ask for one."""
        return self._default_order

    def __getitem__(self, property_name: str) -> SortMapping:
        return self._mappings[property_name.strip().lower()]

    def __contains__(self, property_name: object) -> bool:
        return isinstance(property_name, str) and property_name.strip().lower() in self._mappings

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)


class SortMappingRegistry:
    """Process-wide registry of sort mapping tables keyed by resource shape."""

    def __init__(self, tables: Optional[Mapping[Any, SortMappingTable]] = None):
        self._tables = MappingProxyType(dict(tables or {}))

    def get(self, dto_type: Any) -> Optional[SortMappingTable]:
        """Get the table registered for a resource shape."""
        return self._tables.get(dto_type)

    def has_mapping_for(self, dto_type: Any) -> bool:
        """Check if a table is registered for a resource shape."""
        return dto_type in self._tables

    def __len__(self) -> int:
        return len(self._tables)
