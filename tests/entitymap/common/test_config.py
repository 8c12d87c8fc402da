"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from entitymap.common.config import MAX_DEPTH_CEILING, EntityMapConfig, get_config


@pytest.mark.unit
class TestEntityMapConfig:
    """Test defaults, environment overrides and validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("MAX_DEPTH", "MAX_COLLECTION_SIZE", "CONSTRAINTS_FILE", "LOG_LEVEL"):
            monkeypatch.delenv(f"ENTITYMAP_{name}", raising=False)

        config = EntityMapConfig()

        assert config.max_depth == 64
        assert config.max_collection_size == 100_000
        assert config.constraints_file is None
        assert config.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENTITYMAP_MAX_DEPTH", "12")
        monkeypatch.setenv("ENTITYMAP_CONSTRAINTS_FILE", "/etc/entitymap/constraints.cypher")
        monkeypatch.setenv("ENTITYMAP_LOG_LEVEL", "debug")

        config = EntityMapConfig()

        assert config.max_depth == 12
        assert config.constraints_file == Path("/etc/entitymap/constraints.cypher")
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("depth", [0, MAX_DEPTH_CEILING + 1])
    def test_rejects_out_of_range_depth(self, depth: int) -> None:
        with pytest.raises(ValidationError):
            EntityMapConfig(max_depth=depth)

    def test_accepts_depth_ceiling(self) -> None:
        assert EntityMapConfig(max_depth=MAX_DEPTH_CEILING).max_depth == MAX_DEPTH_CEILING

    def test_rejects_zero_collection_size(self) -> None:
        with pytest.raises(ValidationError):
            EntityMapConfig(max_collection_size=0)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level"):
            EntityMapConfig(log_level="verbose")

    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()
