"""Bidirectional marshalling between schema-less documents and typed entities."""

from entitymap.common.logging import setup_logging
from entitymap.mapping import (
    DocumentToEntityConverter,
    EntityToDocumentConverter,
    from_document,
    to_document,
)
from entitymap.schemas import Entity, EntityField, FieldKind, Location

__version__ = "0.1.0"

__all__ = [
    "DocumentToEntityConverter",
    "Entity",
    "EntityField",
    "EntityToDocumentConverter",
    "FieldKind",
    "Location",
    "__version__",
    "from_document",
    "setup_logging",
    "to_document",
]
