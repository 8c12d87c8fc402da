"""Common utilities: configuration, logging, tracing and wiring.

Factory functions are available via direct import to avoid circular dependencies:
    from entitymap.common.factories import make_document_to_entity_converter
"""

from entitymap.common.config import EntityMapConfig, get_config

__all__ = ["EntityMapConfig", "get_config"]
