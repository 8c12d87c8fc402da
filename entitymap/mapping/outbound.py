"""EntityToDocumentConverter - typed entities to index-ready documents.

String fields are lowercased because index queries are case insensitive; the
inbound converter never restores the original casing. Collections become
ordered lists, nested entities become nested maps and geo locations become a
single ``{"lat", "lon"}`` map that the index recognizes as a geo point.
"""

from collections.abc import Collection
from typing import Any

from entitymap.common.config import MAX_DEPTH_CEILING, get_config
from entitymap.common.logging import get_logger
from entitymap.common.tracing import get_correlation_id
from entitymap.mapping.errors import StructuralLimitExceededError
from entitymap.schemas import COLLECTION_KINDS, Entity, EntityField, FieldKind

logger = get_logger(__name__)

_NESTED_COLLECTION_TYPES = (list, tuple, set, frozenset)


class EntityToDocumentConverter:
    """Converts entities into schema-less documents for the index layer.

    Attributes:
        max_depth: Maximum nesting of entities and collections.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        max_depth = get_config().max_depth if max_depth is None else max_depth
        if not 1 <= max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {max_depth}"
            )
        self.max_depth = max_depth

    def convert(self, entity: Entity) -> dict[str, Any]:
        """Convert every field of an entity into a document entry.

        Args:
            entity: Entity to convert.

        Returns:
            dict[str, Any]: Document keyed by field name.

        Raises:
            StructuralLimitExceededError: If nesting exceeds max_depth.
        """
        document = self._to_document(entity, depth=0)
        logger.debug(
            f"Converted entity with {len(document)} field(s) to document",
            extra={"correlation_id": get_correlation_id(), "entity_type": entity.entity_type},
        )
        return document

    def _to_document(self, entity: Entity, depth: int) -> dict[str, Any]:
        self._check_depth(depth)
        return {field.name: self._field_value(field, depth) for field in entity.get_fields()}

    def _field_value(self, field: EntityField, depth: int) -> Any:
        if field.kind in COLLECTION_KINDS:
            # Sets have no document counterpart and are emitted as lists.
            return self._flatten(field.value, depth + 1)
        if field.kind is FieldKind.ENTITY:
            return self._to_document(field.value, depth + 1)
        if field.kind is FieldKind.STRING:
            return field.value.lower()
        if field.kind is FieldKind.LOCATION:
            # lat/lon keys trigger geo point mapping in the index
            return {"lat": field.value.latitude, "lon": field.value.longitude}
        return field.value

    def _flatten(self, collection: Collection[Any], depth: int) -> list[Any]:
        """Flatten a collection, judging element shape from one sample."""
        self._check_depth(depth)
        items = list(collection)
        if not items:
            return items

        sample = items[0]
        if isinstance(sample, Entity):
            return [self._to_document(element, depth + 1) for element in items]
        if isinstance(sample, _NESTED_COLLECTION_TYPES):
            return [self._flatten(element, depth + 1) for element in items]
        return items

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise StructuralLimitExceededError("max_depth", self.max_depth, depth)


def to_document(entity: Entity) -> dict[str, Any]:
    """Convert an entity with a converter built from the current config."""
    return EntityToDocumentConverter().convert(entity)


__all__ = ["EntityToDocumentConverter", "to_document"]
