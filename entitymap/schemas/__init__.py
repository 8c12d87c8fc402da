"""Typed entity and field models."""

from entitymap.schemas.entity import Entity
from entitymap.schemas.fields import (
    COLLECTION_KINDS,
    SCALAR_KINDS,
    EntityField,
    FieldKind,
    Location,
)

__all__ = [
    "COLLECTION_KINDS",
    "SCALAR_KINDS",
    "Entity",
    "EntityField",
    "FieldKind",
    "Location",
]
