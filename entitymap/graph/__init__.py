"""Uniqueness constraint sources for the schema authority port."""

from entitymap.graph.constraints import (
    ConstraintLoadError,
    ConstraintSchemaAuthority,
    StaticSchemaAuthority,
)

__all__ = ["ConstraintLoadError", "ConstraintSchemaAuthority", "StaticSchemaAuthority"]
