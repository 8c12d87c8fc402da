"""DocumentToEntityConverter - schema-less documents to typed entities.

Infers a field kind for every key of a document, detects geo-location maps,
recurses into nested maps and lists, and flags uniqueness for top-level scalar
fields the schema authority reports as unique.
"""

from collections.abc import Mapping
from typing import Any

from entitymap.common.config import MAX_DEPTH_CEILING, get_config
from entitymap.common.logging import get_logger
from entitymap.common.tracing import get_correlation_id
from entitymap.core.ports.schema_authority import SchemaAuthority
from entitymap.mapping.errors import StructuralLimitExceededError, UnrecognizedElementTypeError
from entitymap.mapping.values import (
    LIST_SCALAR_KINDS,
    decompose,
    geo_key_pair,
    infer_scalar_kind,
    is_sequence,
    parse_location,
    type_name,
)
from entitymap.schemas import Entity, EntityField, FieldKind

logger = get_logger(__name__)


class DocumentToEntityConverter:
    """Converts documents (maps, lists and scalars) into typed entities.

    Holds no mutable state; one instance may serve concurrent calls as long as
    its schema authority is safe for concurrent reads.

    Attributes:
        schema_authority: Source of uniqueness metadata.
        max_depth: Maximum container nesting below the top-level document.
        max_collection_size: Maximum list length or map key count.
    """

    def __init__(
        self,
        schema_authority: SchemaAuthority,
        max_depth: int | None = None,
        max_collection_size: int | None = None,
    ) -> None:
        """Initialize converter, reading unset limits from config.

        Args:
            schema_authority: Source of uniqueness metadata.
            max_depth: Override for ENTITYMAP_MAX_DEPTH.
            max_collection_size: Override for ENTITYMAP_MAX_COLLECTION_SIZE.

        Raises:
            ValueError: If max_depth is outside 1..MAX_DEPTH_CEILING or
                max_collection_size is below 1.
        """
        if max_depth is None or max_collection_size is None:
            config = get_config()
            max_depth = config.max_depth if max_depth is None else max_depth
            if max_collection_size is None:
                max_collection_size = config.max_collection_size

        if not 1 <= max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {max_depth}"
            )
        if max_collection_size < 1:
            raise ValueError(f"max_collection_size must be at least 1, got {max_collection_size}")

        self.schema_authority = schema_authority
        self.max_depth = max_depth
        self.max_collection_size = max_collection_size

    def convert(
        self,
        document: Mapping[str, Any],
        entity_type: str,
        *,
        top_level: bool = True,
        entity: Entity | None = None,
    ) -> Entity:
        """Convert a document into an entity.

        Every key of the document becomes one field. When an entity is
        supplied, fields are added to it (replacing same-named fields) so
        several document fragments can accumulate into one entity. Fields are
        applied only after the whole document converted, so a failure leaves
        a supplied entity untouched.

        Args:
            document: Mapping from field name to value.
            entity_type: Entity type used for uniqueness lookups only.
            top_level: Whether uniqueness flags are honored.
            entity: Optional entity to add fields to.

        Returns:
            Entity: The supplied entity, or a fresh one.

        Raises:
            UnrecognizedElementTypeError: If a value has no known kind.
            StructuralLimitExceededError: If nesting or collection limits are exceeded.
            ValueOutOfRangeError: If an integer does not fit in 64 bits.
        """
        fields = self._build_fields(document, entity_type, top_level, depth=0)

        if entity is None:
            entity = Entity(entity_type=entity_type)
        for field in fields:
            entity.set_field(field)

        logger.debug(
            f"Converted document with {len(fields)} field(s) to {entity_type} entity",
            extra={"correlation_id": get_correlation_id(), "entity_type": entity_type},
        )
        return entity

    # ========== Maps ==========

    def _build_fields(
        self,
        document: Mapping[str, Any],
        entity_type: str,
        top_level: bool,
        depth: int,
        parent_field: str | None = None,
    ) -> list[EntityField]:
        self._check_limits(depth, len(document), parent_field)
        return [
            self._to_field(name, value, entity_type, top_level, depth)
            for name, value in document.items()
        ]

    def _to_entity(
        self,
        document: Mapping[str, Any],
        entity_type: str,
        depth: int,
        parent_field: str | None,
    ) -> Entity:
        entity = Entity()
        for field in self._build_fields(document, entity_type, False, depth, parent_field):
            entity.set_field(field)
        return entity

    def _to_field(
        self, name: str, value: Any, entity_type: str, top_level: bool, depth: int
    ) -> EntityField:
        kind = infer_scalar_kind(value)
        if kind is not None:
            unique = top_level and self.schema_authority.is_property_unique(entity_type, name)
            return EntityField(name=name, value=value, kind=kind, unique=unique)

        if is_sequence(value):
            return self._list_field(name, value, entity_type, depth + 1)

        if isinstance(value, Mapping):
            return self._map_field(name, value, entity_type, depth + 1)

        mapping = decompose(value, name)
        logger.warning(
            f"Coerced opaque value of type {type_name(value)} into a map for field '{name}'",
            extra={
                "correlation_id": get_correlation_id(),
                "entity_type": entity_type,
                "field_name": name,
                "value_type": type_name(value),
            },
        )
        return self._map_field(name, mapping, entity_type, depth + 1)

    def _map_field(
        self, name: str, mapping: Mapping[str, Any], entity_type: str, depth: int
    ) -> EntityField:
        location = parse_location(mapping)
        if location is not None:
            return EntityField.of_location(name, location)

        if geo_key_pair(mapping) is not None:
            logger.debug(
                f"Field '{name}' looks like a geo location but its coordinates do not parse; "
                "treating it as a nested entity",
                extra={
                    "correlation_id": get_correlation_id(),
                    "entity_type": entity_type,
                    "field_name": name,
                },
            )

        return EntityField.of_entity(name, self._to_entity(mapping, entity_type, depth, name))

    # ========== Lists ==========

    def _list_field(
        self, name: str, values: list[Any] | tuple[Any, ...], entity_type: str, depth: int
    ) -> EntityField:
        self._check_limits(depth, len(values), name)
        if not values:
            return EntityField.of_list(name, [])

        sample = values[0]
        if isinstance(sample, Mapping):
            return EntityField.of_list(
                name, self._materialize(values, entity_type, depth, name), FieldKind.ENTITY
            )
        if is_sequence(sample):
            return EntityField.of_list(
                name, self._materialize(values, entity_type, depth, name), FieldKind.LIST
            )

        element_kind = infer_scalar_kind(sample)
        if element_kind not in LIST_SCALAR_KINDS:
            raise UnrecognizedElementTypeError(type_name(sample), name)
        # Homogeneity is assumed from the first element; the rest are copied unexamined.
        return EntityField.of_list(name, list(values), element_kind)

    def _materialize(
        self,
        values: list[Any] | tuple[Any, ...],
        entity_type: str,
        depth: int,
        field_name: str,
    ) -> list[Any]:
        """Recursively convert list elements shaped like the first element."""
        self._check_limits(depth, len(values), field_name)
        if not values:
            return []

        sample = values[0]
        if isinstance(sample, Mapping):
            entities = []
            for element in values:
                if not isinstance(element, Mapping):
                    raise UnrecognizedElementTypeError(type_name(element), field_name)
                entities.append(self._to_entity(element, entity_type, depth + 1, field_name))
            return entities

        if is_sequence(sample):
            nested = []
            for element in values:
                if not is_sequence(element):
                    raise UnrecognizedElementTypeError(type_name(element), field_name)
                nested.append(self._materialize(element, entity_type, depth + 1, field_name))
            return nested

        return list(values)

    # ========== Limits ==========

    def _check_limits(self, depth: int, size: int, field_name: str | None) -> None:
        if depth > self.max_depth:
            raise StructuralLimitExceededError("max_depth", self.max_depth, depth, field_name)
        if size > self.max_collection_size:
            raise StructuralLimitExceededError(
                "max_collection_size", self.max_collection_size, size, field_name
            )


def from_document(
    document: Mapping[str, Any],
    entity_type: str,
    schema_authority: SchemaAuthority,
    *,
    top_level: bool = True,
    entity: Entity | None = None,
) -> Entity:
    """Convert a document with a converter built from the current config.

    Example:
        >>> from entitymap.graph.constraints import StaticSchemaAuthority
        >>> entity = from_document({"email": "X@Y.com"}, "user",
        ...                        StaticSchemaAuthority({"user": ["email"]}))
        >>> entity.get_field("email").unique
        True
    """
    converter = DocumentToEntityConverter(schema_authority)
    return converter.convert(document, entity_type, top_level=top_level, entity=entity)


__all__ = ["DocumentToEntityConverter", "from_document"]
