"""LoadDocumentUseCase - Fetch a persisted entity and render it as a document."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from entitymap.core.ports import EntityRepository
from entitymap.mapping import EntityToDocumentConverter

logger = logging.getLogger(__name__)


class LoadDocumentUseCase:
    """Use case for reading an entity back as a normalized document.

    String values come back lowercased; callers needing original casing must
    keep the source document.
    """

    def __init__(
        self, repository: EntityRepository, document_converter: EntityToDocumentConverter
    ) -> None:
        self.repository = repository
        self.document_converter = document_converter
        logger.info("Initialized LoadDocumentUseCase")

    def execute(self, entity_type: str, entity_id: UUID) -> dict[str, Any] | None:
        """Load an entity and convert it.

        Args:
            entity_type: Declared entity type.
            entity_id: Identifier assigned by the persistence layer.

        Returns:
            dict[str, Any] | None: The document, or None when no entity exists.
        """
        entity = self.repository.find_by_id(entity_type, entity_id)
        if entity is None:
            logger.info(f"No {entity_type} entity found for {entity_id}")
            return None

        return self.document_converter.convert(entity)


# Export public API
__all__ = ["LoadDocumentUseCase"]
