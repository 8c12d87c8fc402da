"""StoreDocumentUseCase - Convert an inbound document and persist it."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from entitymap.core.ports import DocumentIndexPort, EntityRepository
from entitymap.mapping import DocumentToEntityConverter, EntityToDocumentConverter
from entitymap.schemas import Entity

logger = logging.getLogger(__name__)


class StoreDocumentUseCase:
    """Use case for storing an API document as a typed entity.

    Workflow:
    1. Convert the document into a top-level entity (uniqueness flags honored)
    2. Save the entity through the repository
    3. Index the normalized document of the saved entity, when an index is configured
    """

    def __init__(
        self,
        converter: DocumentToEntityConverter,
        repository: EntityRepository,
        document_converter: EntityToDocumentConverter | None = None,
        index: DocumentIndexPort | None = None,
    ) -> None:
        """Initialize StoreDocumentUseCase.

        Args:
            converter: Inbound document converter.
            repository: Entity persistence port.
            document_converter: Outbound converter; required when index is set.
            index: Optional search index port.

        Raises:
            ValueError: If index is given without document_converter.
        """
        if index is not None and document_converter is None:
            raise ValueError("document_converter is required when an index is configured")

        self.converter = converter
        self.repository = repository
        self.document_converter = document_converter
        self.index = index
        logger.info("Initialized StoreDocumentUseCase")

    def execute(
        self,
        document: Mapping[str, Any],
        entity_type: str,
        entity: Entity | None = None,
    ) -> Entity:
        """Convert, persist and optionally index a document.

        Args:
            document: Raw API document.
            entity_type: Declared entity type.
            entity: Optional existing entity to accumulate fields into.

        Returns:
            Entity: The entity returned by the repository.

        Raises:
            EntityMappingError: If the document cannot be converted. Nothing is saved.
        """
        converted = self.converter.convert(document, entity_type, top_level=True, entity=entity)
        saved = self.repository.save(converted)
        logger.info(
            f"Stored {entity_type} entity {saved.entity_id} with {len(saved.properties)} field(s)"
        )

        if self.index is not None and self.document_converter is not None:
            normalized = self.document_converter.convert(saved)
            self.index.index_document(entity_type, saved.entity_id, normalized)
            logger.debug(f"Indexed {entity_type} entity {saved.entity_id}")

        return saved


# Export public API
__all__ = ["StoreDocumentUseCase"]
