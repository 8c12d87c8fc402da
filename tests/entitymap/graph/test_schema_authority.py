"""Tests for schema authorities built from uniqueness constraints."""

from pathlib import Path

import pytest

from entitymap.core.ports import SchemaAuthority
from entitymap.graph.constraints import (
    ConstraintLoadError,
    ConstraintSchemaAuthority,
    StaticSchemaAuthority,
    load_constraint_statements,
    parse_unique_properties,
)

CONSTRAINTS = """\
// Uniqueness constraints for core entity types
CREATE CONSTRAINT user_email_unique IF NOT EXISTS
FOR (u:User) REQUIRE u.email IS UNIQUE;

CREATE CONSTRAINT user_username_unique IF NOT EXISTS FOR (u:User) REQUIRE (u.username) IS UNIQUE;
CREATE CONSTRAINT device_serial_unique IF NOT EXISTS FOR (d:Device) REQUIRE d.serial IS UNIQUE;

// Composite and non-unique constraints carry no single-property uniqueness
CREATE CONSTRAINT host_ip_key IF NOT EXISTS FOR (h:Host) REQUIRE (h.ip, h.port) IS UNIQUE;
CREATE CONSTRAINT user_name_exists IF NOT EXISTS FOR (u:User) REQUIRE u.name IS NOT NULL;
CREATE INDEX user_created_idx IF NOT EXISTS FOR (u:User) ON (u.created_at);
"""


@pytest.fixture
def constraints_file(tmp_path: Path) -> Path:
    path = tmp_path / "constraints.cypher"
    path.write_text(CONSTRAINTS, encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoadConstraintStatements:
    """Test constraint file parsing."""

    def test_strips_comments_and_splits(self, constraints_file: Path) -> None:
        statements = load_constraint_statements(constraints_file)

        assert len(statements) == 6
        assert statements[0].startswith("CREATE CONSTRAINT user_email_unique")
        assert not any(s.startswith("//") for s in statements)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConstraintLoadError, match="not found"):
            load_constraint_statements(tmp_path / "missing.cypher")

    def test_parse_unique_properties(self, constraints_file: Path) -> None:
        unique = parse_unique_properties(load_constraint_statements(constraints_file))

        assert unique == {
            "user": frozenset({"email", "username"}),
            "device": frozenset({"serial"}),
        }


@pytest.mark.unit
class TestStaticSchemaAuthority:
    """Test in-memory uniqueness lookups."""

    def test_lookup(self) -> None:
        authority = StaticSchemaAuthority({"User": ["email"]})

        assert authority.is_property_unique("user", "email") is True
        assert authority.is_property_unique("USER", "email") is True
        assert authority.is_property_unique("user", "Email") is False

    def test_absent_entries_are_not_unique(self) -> None:
        authority = StaticSchemaAuthority()

        assert authority.is_property_unique("user", "email") is False
        assert authority.entity_types == []

    def test_satisfies_port(self) -> None:
        assert isinstance(StaticSchemaAuthority(), SchemaAuthority)


@pytest.mark.unit
class TestConstraintSchemaAuthority:
    """Test authorities loaded from constraint files."""

    def test_from_file(self, constraints_file: Path) -> None:
        authority = ConstraintSchemaAuthority.from_file(constraints_file)

        assert authority.is_property_unique("user", "email") is True
        assert authority.is_property_unique("user", "username") is True
        assert authority.is_property_unique("user", "name") is False
        assert authority.is_property_unique("host", "ip") is False
        assert authority.entity_types == ["device", "user"]

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConstraintLoadError):
            ConstraintSchemaAuthority.from_file(tmp_path / "nope.cypher")
