"""Exceptions raised by document/entity conversion.

All of these are fatal to the conversion call that raised them; no partial
entity or document is returned.
"""


class EntityMappingError(Exception):
    """Base class for conversion failures."""

    pass


class UnrecognizedElementTypeError(EntityMappingError, TypeError):
    """Raised when a value's runtime type matches none of the known kinds.

    Attributes:
        type_name: Qualified name of the offending runtime type.
        field_name: Field being converted when the value was found.
    """

    def __init__(self, type_name: str, field_name: str | None = None) -> None:
        self.type_name = type_name
        self.field_name = field_name
        location = f" in field '{field_name}'" if field_name is not None else ""
        super().__init__(f"Unrecognized element type {type_name}{location}")


class StructuralLimitExceededError(EntityMappingError):
    """Raised when nesting depth or collection size exceeds the configured bound.

    Attributes:
        limit_name: Which limit was exceeded ("max_depth" or "max_collection_size").
        limit: Configured bound.
        actual: Observed depth or size.
        field_name: Field being converted when the limit was hit.
    """

    def __init__(
        self, limit_name: str, limit: int, actual: int, field_name: str | None = None
    ) -> None:
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
        self.field_name = field_name
        location = f" at field '{field_name}'" if field_name is not None else ""
        super().__init__(f"Structural limit {limit_name}={limit} exceeded ({actual}){location}")


class ValueOutOfRangeError(EntityMappingError, ValueError):
    """Raised when an integer does not fit any supported integer width."""

    pass


__all__ = [
    "EntityMappingError",
    "StructuralLimitExceededError",
    "UnrecognizedElementTypeError",
    "ValueOutOfRangeError",
]
