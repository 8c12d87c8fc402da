"""Bidirectional conversion between schema-less documents and typed entities."""

from entitymap.mapping.errors import (
    EntityMappingError,
    StructuralLimitExceededError,
    UnrecognizedElementTypeError,
    ValueOutOfRangeError,
)
from entitymap.mapping.inbound import DocumentToEntityConverter, from_document
from entitymap.mapping.outbound import EntityToDocumentConverter, to_document
from entitymap.mapping.values import Decomposable

__all__ = [
    "Decomposable",
    "DocumentToEntityConverter",
    "EntityMappingError",
    "EntityToDocumentConverter",
    "StructuralLimitExceededError",
    "UnrecognizedElementTypeError",
    "ValueOutOfRangeError",
    "from_document",
    "to_document",
]
