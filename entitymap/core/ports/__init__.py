"""Ports connecting the conversion core to external collaborators."""

from entitymap.core.ports.document_index import DocumentIndexPort
from entitymap.core.ports.entity_repository import EntityRepository
from entitymap.core.ports.schema_authority import SchemaAuthority

__all__ = ["DocumentIndexPort", "EntityRepository", "SchemaAuthority"]
