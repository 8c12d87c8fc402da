"""Configuration management for the entity mapping engine.

Loads environment variables using pydantic-settings for type-safe configuration.
Structural limits for conversions and the schema constraints source are defined here.
"""

import os
from functools import lru_cache
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Each nesting level costs up to five interpreter frames during conversion;
# this keeps the deepest accepted document inside the default recursion limit.
MAX_DEPTH_CEILING = 128

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _resolve_env_file() -> str | None:
    """Locate the .env file regardless of the current working directory.

    Preference order:
        1. ENTITYMAP_ENV_FILE environment variable (explicit override)
        2. Current working directory (common for local runs)
    """
    override = os.getenv("ENTITYMAP_ENV_FILE")
    if override:
        override_path = Path(override).expanduser()
        if override_path.is_file():
            return str(override_path)

    cwd_candidate = Path.cwd() / ".env"
    if cwd_candidate.is_file():
        return str(cwd_candidate)

    return None


def ensure_env_loaded() -> None:
    """Load environment variables from disk exactly once."""
    global _ENV_LOADED

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        env_path = _resolve_env_file()
        if env_path:
            load_dotenv(env_path, override=False)

        _ENV_LOADED = True


ensure_env_loaded()


class EntityMapConfig(BaseSettings):
    """Main configuration class for document/entity conversion.

    Loads structural limits, the constraints source and logging settings from
    environment variables prefixed with ``ENTITYMAP_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYMAP_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Structural Limits ==========
    max_depth: int = Field(default=64, ge=1, le=MAX_DEPTH_CEILING)  # nested maps/lists
    max_collection_size: int = Field(default=100_000, ge=1)  # list length or map key count

    # ========== Schema Authority ==========
    constraints_file: Path | None = None

    # ========== Observability ==========
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard logging level, got {value!r}")
        return normalized


@lru_cache(maxsize=1)
def get_config() -> EntityMapConfig:
    """Return cached Settings instance (thread-safe, process-local).

    Returns:
        EntityMapConfig: The configuration instance loaded from environment variables.
    """
    return EntityMapConfig()


# Export convenience accessors
__all__ = ["MAX_DEPTH_CEILING", "EntityMapConfig", "ensure_env_loaded", "get_config"]
