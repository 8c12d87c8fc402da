"""Typed field model for persisted entities.

A field is a named value tagged with one of a closed set of kinds. Scalar kinds
may carry a uniqueness flag; collection kinds may record the kind of their
elements.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ========== Enums ==========


class FieldKind(str, Enum):
    """Type tags for entity fields."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    FLOAT = "float"
    UUID = "uuid"
    LIST = "list"
    ARRAY = "array"
    SET = "set"
    LOCATION = "location"
    ENTITY = "entity"


SCALAR_KINDS: frozenset[FieldKind] = frozenset(
    {
        FieldKind.STRING,
        FieldKind.BOOLEAN,
        FieldKind.INTEGER,
        FieldKind.LONG,
        FieldKind.DOUBLE,
        FieldKind.FLOAT,
        FieldKind.UUID,
    }
)

COLLECTION_KINDS: frozenset[FieldKind] = frozenset(
    {FieldKind.LIST, FieldKind.ARRAY, FieldKind.SET}
)


# ========== Values ==========


class Location(BaseModel):
    """Geographic point derived from a latitude/longitude pair.

    Examples:
        >>> Location(latitude=40.7, longitude=-74.0).latitude
        40.7
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., allow_inf_nan=False, description="Latitude in degrees")
    longitude: float = Field(..., allow_inf_nan=False, description="Longitude in degrees")


# ========== Fields ==========


class EntityField(BaseModel):
    """A named, typed, optionally-unique value inside an entity.

    Attributes:
        name: Field name, unique within its entity.
        value: Field value. Nested entities, lists and sets are stored as-is.
        kind: Type tag of the value.
        unique: Whether the persistence layer should enforce uniqueness.
            Only valid for scalar kinds.
        element_kind: Kind of the first element for collection fields, None
            when the collection is empty or the field is not a collection.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Field name")
    value: Any = Field(..., description="Field value")
    kind: FieldKind = Field(..., description="Field type tag")
    unique: bool = Field(default=False, description="Uniqueness constraint flag")
    element_kind: FieldKind | None = Field(
        default=None, description="Element type tag for collection fields"
    )

    @model_validator(mode="after")
    def _check_flags(self) -> "EntityField":
        if self.unique and self.kind not in SCALAR_KINDS:
            raise ValueError(f"unique flag is only valid for scalar fields, not {self.kind.value}")
        if self.element_kind is not None and self.kind not in COLLECTION_KINDS:
            raise ValueError(
                f"element_kind is only valid for collection fields, not {self.kind.value}"
            )
        return self

    @classmethod
    def of_list(
        cls, name: str, values: list[Any], element_kind: FieldKind | None = None
    ) -> "EntityField":
        """Build an ordered-list field."""
        return cls(name=name, value=values, kind=FieldKind.LIST, element_kind=element_kind)

    @classmethod
    def of_set(
        cls, name: str, values: set[Any] | frozenset[Any], element_kind: FieldKind | None = None
    ) -> "EntityField":
        """Build a set field."""
        return cls(name=name, value=values, kind=FieldKind.SET, element_kind=element_kind)

    @classmethod
    def of_location(cls, name: str, location: Location) -> "EntityField":
        """Build a geo-location field."""
        return cls(name=name, value=location, kind=FieldKind.LOCATION)

    @classmethod
    def of_entity(cls, name: str, entity: Any) -> "EntityField":
        """Build a nested-entity field."""
        return cls(name=name, value=entity, kind=FieldKind.ENTITY)

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS

    @property
    def is_collection(self) -> bool:
        return self.kind in COLLECTION_KINDS


__all__ = [
    "COLLECTION_KINDS",
    "SCALAR_KINDS",
    "EntityField",
    "FieldKind",
    "Location",
]
