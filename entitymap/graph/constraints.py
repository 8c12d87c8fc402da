"""Uniqueness constraint metadata for entity types.

Loads uniqueness constraints declared as Cypher statements and exposes them
through the SchemaAuthority port. Only single-property ``IS UNIQUE``
constraints mark a property as unique; composite keys, existence and type
constraints are ignored.
"""

import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from entitymap.common.logging import get_logger
from entitymap.common.tracing import get_correlation_id

logger = get_logger(__name__)

_UNIQUE_CONSTRAINT = re.compile(
    r"FOR\s*\(\s*\w*\s*:\s*`?(?P<label>\w+)`?\s*\)\s*"
    r"REQUIRE\s+\(?\s*\w+\.`?(?P<prop>\w+)`?\s*\)?\s+IS\s+UNIQUE",
    re.IGNORECASE,
)


class ConstraintLoadError(Exception):
    """Exception raised when the constraints file cannot be loaded."""

    pass


def load_constraint_statements(file_path: Path) -> list[str]:
    """Load and parse Cypher constraint statements from a constraints file.

    Strips ``//`` comment lines and splits statements by semicolons. Filters
    out empty statements and whitespace.

    Args:
        file_path: Path to the constraints file.

    Returns:
        list[str]: List of constraint statements.

    Raises:
        ConstraintLoadError: If the constraints file does not exist or cannot be read.

    Example:
        >>> statements = load_constraint_statements(Path("constraints.cypher"))
        >>> "user_email_unique" in statements[0]
        True
    """
    if not file_path.is_file():
        raise ConstraintLoadError(f"Constraints file not found at {file_path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConstraintLoadError(f"Failed to read constraints file {file_path}: {e}") from e

    lines = []
    for line in content.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("//"):
            lines.append(line)

    result = []
    for stmt in "\n".join(lines).split(";"):
        cleaned_stmt = stmt.strip()
        if cleaned_stmt:
            result.append(cleaned_stmt)

    return result


def parse_unique_properties(statements: Iterable[str]) -> dict[str, frozenset[str]]:
    """Extract unique properties per label from constraint statements.

    Args:
        statements: Cypher constraint statements.

    Returns:
        dict[str, frozenset[str]]: Lowercased label mapped to its unique property names.

    Example:
        >>> parse_unique_properties(
        ...     ["CREATE CONSTRAINT u IF NOT EXISTS FOR (n:User) REQUIRE n.email IS UNIQUE"]
        ... )
        {'user': frozenset({'email'})}
    """
    collected: dict[str, set[str]] = {}
    for statement in statements:
        match = _UNIQUE_CONSTRAINT.search(statement)
        if match is None:
            logger.debug(f"Skipping non-unique or composite constraint: {statement[:100]}")
            continue
        collected.setdefault(match.group("label").lower(), set()).add(match.group("prop"))

    return {label: frozenset(props) for label, props in collected.items()}


class StaticSchemaAuthority:
    """In-memory schema authority.

    Entity types match case-insensitively; property names match exactly.
    Immutable after construction, so concurrent reads need no locking.

    Example:
        >>> authority = StaticSchemaAuthority({"user": ["email", "username"]})
        >>> authority.is_property_unique("User", "email")
        True
        >>> authority.is_property_unique("user", "name")
        False
    """

    def __init__(self, unique_properties: Mapping[str, Iterable[str]] | None = None) -> None:
        self._unique_properties: dict[str, frozenset[str]] = {
            entity_type.lower(): frozenset(props)
            for entity_type, props in (unique_properties or {}).items()
        }

    def is_property_unique(self, entity_type: str, field_name: str) -> bool:
        props = self._unique_properties.get(entity_type.lower())
        return props is not None and field_name in props

    @property
    def entity_types(self) -> list[str]:
        return sorted(self._unique_properties)


class ConstraintSchemaAuthority(StaticSchemaAuthority):
    """Schema authority backed by a Cypher constraints file."""

    @classmethod
    def from_file(cls, file_path: Path) -> "ConstraintSchemaAuthority":
        """Build an authority from the unique constraints declared in file_path.

        Raises:
            ConstraintLoadError: If the constraints file does not exist or cannot be read.
        """
        correlation_id = get_correlation_id()
        statements = load_constraint_statements(file_path)
        unique_properties = parse_unique_properties(statements)

        logger.info(
            f"Loaded {len(unique_properties)} entity type(s) with unique constraints",
            extra={
                "correlation_id": correlation_id,
                "statement_count": len(statements),
                "constraints_file": str(file_path),
            },
        )
        return cls(unique_properties)


__all__ = [
    "ConstraintLoadError",
    "ConstraintSchemaAuthority",
    "StaticSchemaAuthority",
    "load_constraint_statements",
    "parse_unique_properties",
]
