"""DocumentIndexPort - Port interface for the search/index layer.

Receives the lowercased, flattened documents produced by the outbound
converter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID


class DocumentIndexPort(Protocol):
    """Port interface for indexing converted documents."""

    def index_document(
        self, entity_type: str, entity_id: UUID | None, document: Mapping[str, Any]
    ) -> None:
        """Index a normalized document.

        Args:
            entity_type: Declared type of the source entity.
            entity_id: Identifier assigned by the persistence layer, if any.
            document: Normalized document to index.

        Raises:
            Exception: If the index write fails.
        """
        ...


__all__ = ["DocumentIndexPort"]
