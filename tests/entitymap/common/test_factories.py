"""Tests for converter factory wiring."""

from pathlib import Path

import pytest

from entitymap.common.config import EntityMapConfig
from entitymap.common.factories import (
    make_document_to_entity_converter,
    make_entity_to_document_converter,
    make_schema_authority,
)
from entitymap.graph.constraints import ConstraintSchemaAuthority, StaticSchemaAuthority


@pytest.mark.unit
class TestFactories:
    """Test wiring of config, schema authority and converters."""

    def test_schema_authority_without_constraints(self) -> None:
        authority = make_schema_authority(EntityMapConfig(constraints_file=None))

        assert isinstance(authority, StaticSchemaAuthority)
        assert authority.is_property_unique("user", "email") is False

    def test_schema_authority_from_constraints_file(self, tmp_path: Path) -> None:
        path = tmp_path / "constraints.cypher"
        path.write_text(
            "CREATE CONSTRAINT user_email_unique IF NOT EXISTS "
            "FOR (u:User) REQUIRE u.email IS UNIQUE;\n",
            encoding="utf-8",
        )

        authority = make_schema_authority(EntityMapConfig(constraints_file=path))

        assert isinstance(authority, ConstraintSchemaAuthority)
        assert authority.is_property_unique("user", "email") is True

    def test_inbound_converter_uses_config_limits(self) -> None:
        config = EntityMapConfig(max_depth=9, max_collection_size=99, constraints_file=None)

        converter = make_document_to_entity_converter(config)

        assert converter.max_depth == 9
        assert converter.max_collection_size == 99

    def test_inbound_converter_accepts_explicit_authority(self) -> None:
        authority = StaticSchemaAuthority({"user": ["email"]})

        converter = make_document_to_entity_converter(
            EntityMapConfig(constraints_file=None), schema_authority=authority
        )
        entity = converter.convert({"email": "a@b.com"}, "user")

        assert converter.schema_authority is authority
        assert entity.get_field("email").unique is True

    def test_outbound_converter_uses_config_depth(self) -> None:
        converter = make_entity_to_document_converter(EntityMapConfig(max_depth=7))
        assert converter.max_depth == 7
