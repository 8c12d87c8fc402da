"""SchemaAuthority - Port interface for uniqueness metadata lookups.

The inbound converter asks this port whether a property of an entity type is
uniqueness-constrained. Implementations must be safe for concurrent reads and
free of side effects.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SchemaAuthority(Protocol):
    """Answers "is this property unique for this entity type?"."""

    def is_property_unique(self, entity_type: str, field_name: str) -> bool:
        """Return True when field_name is uniqueness-constrained for entity_type.

        Unknown entity types and properties are reported as not unique.
        """
        ...


__all__ = ["SchemaAuthority"]
