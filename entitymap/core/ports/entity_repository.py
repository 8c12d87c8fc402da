"""Entity repository port definition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from entitymap.schemas import Entity


class EntityRepository(ABC):
    """Repository abstraction for entity persistence operations."""

    @abstractmethod
    def save(self, entity: Entity) -> Entity:
        """Persist an entity and return the stored instance (with its identifier)."""

    @abstractmethod
    def find_by_id(self, entity_type: str, entity_id: UUID) -> Entity | None:
        """Retrieve a single entity by type and identifier."""


__all__ = ["EntityRepository"]
