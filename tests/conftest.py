"""Shared pytest fixtures for the entitymap test suite.

Provides test configurations, schema authorities and converters used across
all test modules.
"""

from collections.abc import Iterator
from typing import Any

import pytest

from entitymap.common.config import EntityMapConfig, get_config
from entitymap.graph.constraints import StaticSchemaAuthority
from entitymap.mapping import DocumentToEntityConverter, EntityToDocumentConverter

# ========== Test Environment Setup ==========


@pytest.fixture(autouse=True)
def reset_config_cache() -> Iterator[None]:
    """Drop the cached config so environment changes made by a test are seen."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


# ========== Configuration Fixtures ==========


@pytest.fixture
def test_config() -> EntityMapConfig:
    """Provide test configuration with small structural limits.

    Returns:
        EntityMapConfig: Configuration instance for testing.
    """
    return EntityMapConfig(
        max_depth=16,
        max_collection_size=1000,
        log_level="DEBUG",
    )


# ========== Conversion Fixtures ==========


@pytest.fixture
def schema_authority() -> StaticSchemaAuthority:
    """Schema authority with unique email and username for users."""
    return StaticSchemaAuthority({"user": ["email", "username"], "device": ["serial"]})


@pytest.fixture
def inbound(
    schema_authority: StaticSchemaAuthority, test_config: EntityMapConfig
) -> DocumentToEntityConverter:
    """Inbound converter wired to the test schema authority."""
    return DocumentToEntityConverter(
        schema_authority,
        max_depth=test_config.max_depth,
        max_collection_size=test_config.max_collection_size,
    )


@pytest.fixture
def outbound(test_config: EntityMapConfig) -> EntityToDocumentConverter:
    """Outbound converter using the test depth limit."""
    return EntityToDocumentConverter(max_depth=test_config.max_depth)


def nested_document(levels: int, leaf: Any = 1) -> dict[str, Any]:
    """Build a document whose deepest map sits ``levels`` maps below the top."""
    document: dict[str, Any] = {"value": leaf}
    for _ in range(levels):
        document = {"child": document}
    return document


@pytest.fixture
def make_nested() -> Any:
    """Expose nested_document to tests."""
    return nested_document


# ========== Pytest Configuration ==========


def pytest_configure(config: Any) -> None:
    """Configure pytest markers.

    Args:
        config: pytest config object.
    """
    config.addinivalue_line(
        "markers",
        "unit: Fast unit tests with no external dependencies",
    )
