"""Factory functions for creating fully-wired converters and dependencies.

Centralizes dependency injection so callers pass a schema authority explicitly
instead of reaching for a process-wide registry.
"""

from entitymap.common.config import EntityMapConfig, get_config
from entitymap.core.ports import SchemaAuthority
from entitymap.graph.constraints import ConstraintSchemaAuthority, StaticSchemaAuthority
from entitymap.mapping import DocumentToEntityConverter, EntityToDocumentConverter


def make_schema_authority(config: EntityMapConfig | None = None) -> SchemaAuthority:
    """Create the schema authority described by config.

    Uses the constraints file when configured, otherwise an authority that
    reports every property as not unique.

    Raises:
        ConstraintLoadError: If the configured constraints file cannot be loaded.
    """
    config = config or get_config()
    if config.constraints_file is not None:
        return ConstraintSchemaAuthority.from_file(config.constraints_file)
    return StaticSchemaAuthority()


def make_document_to_entity_converter(
    config: EntityMapConfig | None = None,
    schema_authority: SchemaAuthority | None = None,
) -> DocumentToEntityConverter:
    """Create an inbound converter with limits and schema authority from config.

    Example:
        converter = make_document_to_entity_converter()
        entity = converter.convert({"email": "a@b.com"}, "user")
    """
    config = config or get_config()
    return DocumentToEntityConverter(
        schema_authority=schema_authority or make_schema_authority(config),
        max_depth=config.max_depth,
        max_collection_size=config.max_collection_size,
    )


def make_entity_to_document_converter(
    config: EntityMapConfig | None = None,
) -> EntityToDocumentConverter:
    """Create an outbound converter with limits from config."""
    config = config or get_config()
    return EntityToDocumentConverter(max_depth=config.max_depth)


__all__ = [
    "make_document_to_entity_converter",
    "make_entity_to_document_converter",
    "make_schema_authority",
]
