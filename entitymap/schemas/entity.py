"""Entity schema.

An entity is a flat mapping from field name to typed field. Nested documents
become nested entities held by ENTITY-kind fields.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from entitymap.schemas.fields import EntityField


class Entity(BaseModel):
    """Typed record handed to and received from the persistence layer.

    Examples:
        >>> from entitymap.schemas.fields import FieldKind
        >>> entity = Entity(entity_type="user")
        >>> entity.set_field(EntityField(name="email", value="a@b.com", kind=FieldKind.STRING))
        >>> entity.get_field("email").value
        'a@b.com'
    """

    entity_type: str | None = Field(None, description="Declared entity type, if known")
    entity_id: UUID | None = Field(None, description="Identifier assigned by the persistence layer")
    properties: dict[str, EntityField] = Field(
        default_factory=dict, description="Fields keyed by field name"
    )

    def set_field(self, field: EntityField) -> None:
        """Add a field, replacing any existing field with the same name."""
        self.properties[field.name] = field

    def get_field(self, name: str) -> EntityField | None:
        return self.properties.get(name)

    def has_field(self, name: str) -> bool:
        return name in self.properties

    def remove_field(self, name: str) -> EntityField | None:
        return self.properties.pop(name, None)

    def get_fields(self) -> list[EntityField]:
        return list(self.properties.values())

    def field_names(self) -> list[str]:
        return list(self.properties)


__all__ = ["Entity"]
