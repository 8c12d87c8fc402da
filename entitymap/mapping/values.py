"""Runtime classification of document values.

Maps Python and numpy scalar types onto field kinds, parses geo coordinates and
decomposes the narrow set of structured objects allowed at the document
boundary.
"""

import dataclasses
import math
import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

import numpy as np
from pydantic import BaseModel

from entitymap.mapping.errors import UnrecognizedElementTypeError, ValueOutOfRangeError
from entitymap.schemas.fields import FieldKind, Location

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Checked in order; the long-form pair wins.
GEO_KEY_PAIRS: tuple[tuple[str, str], ...] = (("latitude", "longitude"), ("lat", "lon"))

# Element kinds a list field may hold by copying its elements verbatim.
LIST_SCALAR_KINDS: frozenset[FieldKind] = frozenset(
    {FieldKind.STRING, FieldKind.BOOLEAN, FieldKind.INTEGER, FieldKind.DOUBLE, FieldKind.LONG}
)

# Decimal literal with optional exponent and float/double suffix. Digit
# separators, hex and the inf/nan spellings are not coordinates.
_COORDINATE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?", re.ASCII)


@runtime_checkable
class Decomposable(Protocol):
    """Capability of objects that can be structurally decomposed into named fields."""

    def to_document(self) -> Mapping[str, Any]:
        ...


def type_name(value: Any) -> str:
    """Qualified runtime type name used in error messages."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def is_sequence(value: Any) -> bool:
    """Ordered list in the document sense; strings and bytes are not."""
    return isinstance(value, (list, tuple))


def _integer_kind(value: int) -> FieldKind:
    if INT32_MIN <= value <= INT32_MAX:
        return FieldKind.INTEGER
    if INT64_MIN <= value <= INT64_MAX:
        return FieldKind.LONG
    raise ValueOutOfRangeError(f"Integer {value} does not fit in 64 bits")


def infer_scalar_kind(value: Any) -> FieldKind | None:
    """Return the scalar kind of value, or None when value is not a scalar.

    Precedence is string, boolean, integer, floating point, then UUID. bool is
    tested before int because it subclasses int. numpy scalars are classified
    by their own dtype width.

    Raises:
        ValueOutOfRangeError: If an integer does not fit in 64 bits.
    """
    if isinstance(value, str):
        return FieldKind.STRING
    if isinstance(value, (bool, np.bool_)):
        return FieldKind.BOOLEAN
    if isinstance(value, np.integer):
        info = np.iinfo(value.dtype)
        if info.min >= INT32_MIN and info.max <= INT32_MAX:
            return FieldKind.INTEGER
        if info.min >= INT64_MIN and info.max <= INT64_MAX:
            return FieldKind.LONG
        return _integer_kind(int(value))
    if isinstance(value, int):
        return _integer_kind(value)
    if isinstance(value, np.floating):
        return FieldKind.FLOAT if value.dtype.itemsize <= 4 else FieldKind.DOUBLE
    if isinstance(value, float):
        return FieldKind.DOUBLE
    if isinstance(value, UUID):
        return FieldKind.UUID
    return None


def parse_coordinate(value: Any) -> float | None:
    """Parse a coordinate from its string form; None unless a finite decimal."""
    if value is None:
        return None
    text = (value if isinstance(value, str) else str(value)).strip()
    if _COORDINATE.fullmatch(text) is None:
        return None
    number = float(text.rstrip("fFdD"))
    return number if math.isfinite(number) else None


def geo_key_pair(mapping: Mapping[str, Any]) -> tuple[str, str] | None:
    """Return the latitude/longitude keys of a two-key geo-shaped map, if any."""
    if len(mapping) != 2:
        return None
    for lat_key, lon_key in GEO_KEY_PAIRS:
        if mapping.get(lat_key) is not None and mapping.get(lon_key) is not None:
            return lat_key, lon_key
    return None


def parse_location(mapping: Mapping[str, Any]) -> Location | None:
    """Interpret a two-key map as a geo location.

    Returns None when the keys are not a recognized pair or either value does
    not parse as a finite number.
    """
    keys = geo_key_pair(mapping)
    if keys is None:
        return None
    latitude = parse_coordinate(mapping[keys[0]])
    longitude = parse_coordinate(mapping[keys[1]])
    if latitude is None or longitude is None:
        return None
    return Location(latitude=latitude, longitude=longitude)


def decompose(value: Any, field_name: str | None = None) -> Mapping[str, Any]:
    """Convert a structured object into a mapping of named fields.

    Accepted: Decomposable implementations, pydantic models and dataclass
    instances.

    Raises:
        UnrecognizedElementTypeError: If value offers no structural decomposition.
    """
    if isinstance(value, Decomposable):
        return value.to_document()
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise UnrecognizedElementTypeError(type_name(value), field_name)


__all__ = [
    "GEO_KEY_PAIRS",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "LIST_SCALAR_KINDS",
    "Decomposable",
    "decompose",
    "geo_key_pair",
    "infer_scalar_kind",
    "is_sequence",
    "parse_coordinate",
    "parse_location",
    "type_name",
]
